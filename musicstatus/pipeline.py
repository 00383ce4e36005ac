#musicstatus/pipeline.py
import logging
import random
import time
from typing import Callable, Optional

from .config import Settings
from .errors import ProbeError, PublishError
from .models import Off, Paused, PlayerState, Playing, StatusPayload, Stopped
from .music_macos import probe
from .slack_status import DEFAULT_EMOJI, build_status, pick_emoji, publish

log = logging.getLogger(__name__)


def _publish_playing(
    settings: Settings,
    state: Playing,
    publish_fn: Callable[..., None],
    clock: Callable[[], float],
    rng: random.Random,
) -> None:
    log.info("song info: %s", state.track)

    emoji = pick_emoji(rng) if settings.randomize_emoji else DEFAULT_EMOJI
    status: StatusPayload = build_status(state.track, clock(), settings.ttl_seconds, emoji)
    log.info("updating status to %s", status)

    try:
        publish_fn(settings.slack_token, status, url=settings.api_url)
    except PublishError as e:
        log.warning("status update failed: %s", e)
        return
    log.info("status updated: %s", status.status_text)


def run_once(
    settings: Settings,
    probe_fn: Callable[[], PlayerState] = probe,
    publish_fn: Callable[..., None] = publish,
    clock: Callable[[], float] = time.time,
    rng: Optional[random.Random] = None,
) -> Optional[PlayerState]:
    """
    Probe the player once and publish a status if a song is playing.

    Probe and publish failures are logged, never raised. Returns the state
    that was probed, or None if probing failed.
    """
    try:
        state = probe_fn()
    except ProbeError as e:
        log.warning("error fetching song: %s", e)
        return None

    if isinstance(state, Playing):
        _publish_playing(settings, state, publish_fn, clock, rng or random.Random())
    elif isinstance(state, Paused):
        log.info("song paused: %s", state.track)
    elif isinstance(state, Stopped):
        log.info("no song currently selected in music app")
    elif isinstance(state, Off):
        log.info("music app not running")
    else:
        raise TypeError(f"unhandled player state: {state!r}")

    return state
