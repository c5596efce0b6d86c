# joybridge/__main__.py
import sys
import time

from joybridge.io import list_port_names
from joybridge.orchestrator import Orchestrator
from joybridge.utils import get_logger, load_config


def list_ports() -> int:
    ports = list_port_names()
    if not ports:
        print("No serial ports found.")
        return 1
    for p in ports:
        print(p)
    return 0


def main(argv=None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    if argv and argv[0] == "--list-ports":
        return list_ports()

    configs = load_config(argv[0]) if argv else load_config()
    log = get_logger("joybridge", configs.orchestrator.verbose)
    o = Orchestrator(configs)
    o.connect()

    try:
        while True:
            snapshot = o.loop()
            if snapshot.updated:
                nx, ny = snapshot.state.normalized()
                log.debug("x=%+.2f y=%+.2f button=%d", nx, ny, snapshot.state.button)
            time.sleep(o.polling_period)
    except KeyboardInterrupt:
        log.info("CTRL-C – shutting down …")
    finally:
        o.disconnect()
    return 0


if __name__ == "__main__":
    sys.exit(main())
