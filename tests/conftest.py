"""Shared pytest fixtures for the music-slack-status test suite."""

import subprocess
from unittest.mock import Mock

import pytest

from musicstatus.config import Settings


def completed(stdout=b"", returncode=0, stderr=b""):
    return subprocess.CompletedProcess(
        args=["osascript"], returncode=returncode, stdout=stdout, stderr=stderr
    )


@pytest.fixture
def runner():
    """Stub process runner; set ``runner.return_value`` to a CompletedProcess."""
    return Mock(return_value=completed(b'{"type":"Off"}\n'))


@pytest.fixture
def settings():
    return Settings(slack_token="xoxp-test", randomize_emoji=False, ttl_seconds=300)
