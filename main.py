#main.py
import logging
import sys

from musicstatus.config import load_settings
from musicstatus.debug import setup_logging
from musicstatus.pipeline import run_once

log = logging.getLogger("musicstatus")


def main(argv=None) -> int:
    settings = load_settings(argv)
    setup_logging(settings.debug)
    log.debug("settings: %r", settings)

    run_once(settings)
    return 0


if __name__ == "__main__":
    sys.exit(main())
