from .decoder import AxisState, decode_line, try_decode, normalize_axis, split_fields

__all__ = ["AxisState", "decode_line", "try_decode", "normalize_axis", "split_fields"]
