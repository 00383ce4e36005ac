#musicstatus/music_macos.py
import json
import logging
import subprocess
from typing import Callable

from .errors import MalformedRecord, ProcessExecutionFailed, ProcessLaunchFailed, TextDecodeFailed
from .models import Off, Paused, PlayerState, Playing, Stopped, TrackInfo

log = logging.getLogger(__name__)

JXA_SCRIPT = r'''
var app;
try {
  app = Application("Music");
} catch (e) {
  app = Application("iTunes");
}

if (!app.running()) {
  JSON.stringify({ type: "Off" });
} else {
  var state = app.playerState();
  if (state == "stopped") {
    JSON.stringify({ type: "Stopped" });
  } else {
    var track = app.currentTrack;
    JSON.stringify({
      type: state === "playing" ? "Playing" : "Paused",
      name: track.name(),
      artist: track.artist(),
      album: track.album(),
    });
  }
}
'''

OSASCRIPT_COMMAND = ["osascript", "-l", "JavaScript", "-e", JXA_SCRIPT]

Runner = Callable[..., subprocess.CompletedProcess]


def _track_from(record: dict, raw_text: str) -> TrackInfo:
    fields = {}
    for key in ("artist", "name", "album"):
        value = record.get(key)
        if not isinstance(value, str) or not value:
            raise MalformedRecord(f"field '{key}' must be a non-empty string", raw_text)
        fields[key] = value
    return TrackInfo(**fields)


def parse_player_state(text: str, raw_text: str = None) -> PlayerState:
    """
    Parse the JSON record printed by the JXA script.

    ``raw_text`` is what gets attached to a MalformedRecord; it defaults to
    ``text`` but the prober passes the output before it was stripped.
    """
    if raw_text is None:
        raw_text = text

    try:
        record = json.loads(text.strip())
    except ValueError as e:
        raise MalformedRecord(f"invalid JSON: {e}", raw_text) from e

    if not isinstance(record, dict):
        raise MalformedRecord("record is not an object", raw_text)

    kind = record.get("type")
    if kind == "Playing":
        return Playing(_track_from(record, raw_text))
    if kind == "Paused":
        return Paused(_track_from(record, raw_text))
    if kind == "Stopped":
        return Stopped()
    if kind == "Off":
        return Off()
    raise MalformedRecord(f"unknown type {kind!r}", raw_text)


def probe(run: Runner = subprocess.run) -> PlayerState:
    try:
        out = run(OSASCRIPT_COMMAND, capture_output=True)
    except OSError as e:
        raise ProcessLaunchFailed(e) from e

    if out.returncode != 0:
        raise ProcessExecutionFailed(out)

    try:
        text = out.stdout.decode("utf-8")
    except UnicodeDecodeError as e:
        raise TextDecodeFailed(out.stdout) from e

    log.debug("osascript output: %r", text)
    return parse_player_state(text.strip(), raw_text=text)
