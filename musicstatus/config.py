# musicstatus/config.py
import argparse
import os
from dataclasses import dataclass, field
from typing import Mapping, Optional, Sequence

from .slack_status import PROFILE_SET_URL

DEFAULT_TTL_SECONDS = 5 * 60


@dataclass(frozen=True)
class Settings:
    slack_token: str = field(repr=False)
    randomize_emoji: bool = True
    ttl_seconds: int = DEFAULT_TTL_SECONDS
    api_url: str = PROFILE_SET_URL
    debug: bool = False


def _positive_int(value: str) -> int:
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {value!r}")
    if n <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: {value!r}")
    return n


def build_parser(environ: Mapping[str, str]) -> argparse.ArgumentParser:
    token = environ.get("SLACK_SECRET_TOKEN")
    parser = argparse.ArgumentParser(
        prog="music-slack-status",
        description="Set your Slack status to the song playing in Music.app.",
    )
    parser.add_argument(
        "--slack-secret-token",
        default=token,
        required=not token,
        help="Slack OAuth access token (env: SLACK_SECRET_TOKEN)",
    )
    parser.add_argument(
        "--no-randomize-emoji",
        action="store_true",
        help="don't change the status emoji on each run",
    )
    parser.add_argument(
        "--ttl",
        type=_positive_int,
        default=environ.get("MUSIC_STATUS_TTL", str(DEFAULT_TTL_SECONDS)),
        metavar="SECONDS",
        help="seconds until the status expires (env: MUSIC_STATUS_TTL, default: %(default)s)",
    )
    parser.add_argument(
        "--api-url",
        default=environ.get("SLACK_API_URL", PROFILE_SET_URL),
        help=argparse.SUPPRESS,
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        default=environ.get("MUSIC_STATUS_DEBUG") == "1",
        help="verbose logging, also written to music_status_debug.log",
    )
    return parser


def load_settings(argv: Optional[Sequence[str]] = None, environ: Optional[Mapping[str, str]] = None) -> Settings:
    if environ is None:
        environ = os.environ
    args = build_parser(environ).parse_args(argv)
    return Settings(
        slack_token=args.slack_secret_token,
        randomize_emoji=not args.no_randomize_emoji,
        ttl_seconds=args.ttl,
        api_url=args.api_url,
        debug=args.debug,
    )
