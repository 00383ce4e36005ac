#musicstatus/slack_status.py
import logging
import random
from typing import Optional

import requests

from .errors import RemoteRejected, ResponseUndecodable, TransportFailed
from .models import ProfileUpdateResponse, StatusPayload, TrackInfo

log = logging.getLogger(__name__)

# https://api.slack.com/methods/users.profile.set
PROFILE_SET_URL = "https://slack.com/api/users.profile.set"

DEFAULT_EMOJI = ":notes:"

_HTTP = requests.Session()

# Music themed emojis
EMOJIS = (
    ":notes:",
    ":headphones:",
    ":control_knobs:",
    ":musical_score:",
    ":violin:",
    ":saxophone:",
    ":musical_keyboard:",
)


def pick_emoji(rng: random.Random) -> str:
    return rng.choice(EMOJIS)


def status_text(track: TrackInfo) -> str:
    return f"{track.name} by {track.artist}"


def build_status(track: TrackInfo, now: float, ttl: int, emoji: str = DEFAULT_EMOJI) -> StatusPayload:
    if ttl <= 0:
        raise ValueError(f"ttl must be positive, got {ttl}")
    return StatusPayload(
        status_text=status_text(track),
        status_emoji=emoji,
        status_expiration=int(now) + ttl,
    )


def _parse_response(body: str, data) -> ProfileUpdateResponse:
    if not isinstance(data, dict) or not isinstance(data.get("ok"), bool):
        raise ResponseUndecodable(body)
    error = data.get("error")
    if error is not None and not isinstance(error, str):
        raise ResponseUndecodable(body)
    return ProfileUpdateResponse(ok=data["ok"], error=error)


def publish(
    token: str,
    payload: StatusPayload,
    session: Optional[requests.Session] = None,
    url: str = PROFILE_SET_URL,
) -> None:
    """
    Send one users.profile.set request. Returns on ok=true, raises a
    PublishError subclass otherwise. Never retries.
    """
    http = session or _HTTP

    # a token with non-latin-1 characters fails in http.client before anything is sent
    try:
        r = http.post(
            url,
            headers={"Authorization": f"Bearer {token}"},
            json=payload.to_profile(),
        )
    except (requests.RequestException, UnicodeError) as e:
        raise TransportFailed(e) from e

    body = r.text
    try:
        data = r.json()
    except ValueError as e:
        raise ResponseUndecodable(body, e) from e

    res = _parse_response(body, data)
    log.debug("slack response: %s", res)
    if not res.ok:
        raise RemoteRejected(res)
