# musicstatus/models.py
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union


@dataclass(frozen=True)
class TrackInfo:
    artist: str
    name: str
    album: str


@dataclass(frozen=True)
class Playing:
    track: TrackInfo


@dataclass(frozen=True)
class Paused:
    track: TrackInfo


@dataclass(frozen=True)
class Stopped:
    pass


@dataclass(frozen=True)
class Off:
    pass


PlayerState = Union[Playing, Paused, Stopped, Off]


@dataclass(frozen=True)
class StatusPayload:
    status_text: str
    status_emoji: str
    status_expiration: int  # unix seconds

    def to_profile(self) -> Dict[str, Any]:
        return {
            "profile": {
                "status_text": self.status_text,
                "status_emoji": self.status_emoji,
                "status_expiration": self.status_expiration,
            }
        }


@dataclass(frozen=True)
class ProfileUpdateResponse:
    ok: bool
    error: Optional[str] = None
