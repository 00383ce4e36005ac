# musicstatus/debug.py
import logging
import sys
from pathlib import Path

LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

DEBUG_LOG_PATH = Path(__file__).resolve().parents[1] / "music_status_debug.log"


def setup_logging(debug: bool = False) -> None:
    handlers = [logging.StreamHandler(sys.stderr)]
    if debug:
        try:
            handlers.append(logging.FileHandler(DEBUG_LOG_PATH, encoding="utf-8"))
        except OSError as e:
            print(f"[DEBUG] can't open {DEBUG_LOG_PATH}: {e}", file=sys.stderr)

    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        handlers=handlers,
        force=True,
    )
    # urllib3 logs every connection at DEBUG
    logging.getLogger("urllib3").setLevel(logging.INFO)
