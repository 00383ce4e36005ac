# musicstatus/errors.py
import subprocess
from typing import Optional

from .models import ProfileUpdateResponse


class ProbeError(Exception):
    """Music app state could not be read."""


class ProcessLaunchFailed(ProbeError):
    def __init__(self, os_error: OSError):
        super().__init__(f"could not launch osascript: {os_error}")
        self.os_error = os_error


class ProcessExecutionFailed(ProbeError):
    def __init__(self, output: subprocess.CompletedProcess):
        stderr = (output.stderr or b"").decode("utf-8", errors="replace").strip()
        super().__init__(f"osascript exited with status {output.returncode}: {stderr}")
        self.output = output


class TextDecodeFailed(ProbeError):
    def __init__(self, raw: bytes):
        super().__init__(f"osascript output is not valid UTF-8 ({len(raw)} bytes)")
        self.raw = raw


class MalformedRecord(ProbeError):
    def __init__(self, detail: str, raw_text: str):
        super().__init__(f"unexpected player record ({detail}): {raw_text!r}")
        self.detail = detail
        self.raw_text = raw_text


class PublishError(Exception):
    """Slack status could not be updated."""


class TransportFailed(PublishError):
    def __init__(self, cause: Exception):
        super().__init__(f"request to Slack failed: {cause}")
        self.cause = cause


class ResponseUndecodable(PublishError):
    def __init__(self, body: str, cause: Optional[Exception] = None):
        super().__init__(f"could not decode Slack response: {body[:200]!r}")
        self.body = body
        self.cause = cause


class RemoteRejected(PublishError):
    def __init__(self, response: ProfileUpdateResponse):
        super().__init__(f"Slack rejected status update: {response.error or 'unknown error'}")
        self.response = response
