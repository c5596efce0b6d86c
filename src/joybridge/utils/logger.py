import logging

# ANSI color codes
COLORS = {
    logging.DEBUG:    "\033[94m",  # Blue
    logging.INFO:     "\033[92m",  # Green
    logging.WARNING:  "\033[93m",  # Yellow
    logging.ERROR:    "\033[91m",  # Red
    logging.CRITICAL: "\033[95m",  # Magenta
}
RESET_COLOR = "\033[0m"

LOG_FORMAT = "%(levelname)s - %(name)s - %(message)s"


class ColorLogger(logging.Formatter):
    def format(self, record):
        color = COLORS.get(record.levelno, RESET_COLOR)
        message = super().format(record)
        return f"{color}{message}{RESET_COLOR}"


def get_logger(name=__name__, verbose=None):
    """
    Return a named logger with a colored stream handler attached.

    ``verbose`` switches the logger between DEBUG (True) and INFO (False);
    ``None`` keeps an explicit level and otherwise means INFO.
    """
    logger = logging.getLogger(name)
    if not any(isinstance(h.formatter, ColorLogger) for h in logger.handlers):
        ch = logging.StreamHandler()
        ch.setLevel(logging.DEBUG)
        ch.setFormatter(ColorLogger(LOG_FORMAT))
        logger.addHandler(ch)

    if verbose is not None:
        logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    elif logger.level == logging.NOTSET:
        logger.setLevel(logging.INFO)
    return logger
