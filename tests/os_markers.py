"""Platform markers shared by the test-suite."""

from __future__ import annotations

import socket
import sys

import pytest

OS_AGNOSTIC = pytest.mark.os_agnostic
POSIX_ONLY = pytest.mark.skipif(
    sys.platform == "win32" or not hasattr(socket, "AF_UNIX"),
    reason="requires AF_UNIX datagram sockets",
)

__all__ = ["OS_AGNOSTIC", "POSIX_ONLY"]
