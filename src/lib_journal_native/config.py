"""Configuration helpers for the journal endpoint.

Purpose
-------
Resolve the socket path from explicit arguments, the environment, and an
optional ``.env`` file, keeping the core free of configuration concerns.

Contents
--------
* :data:`SOCKET_ENV_VAR` / :data:`DOTENV_ENV_VAR` - recognised variables.
* :func:`enable_dotenv` - load the nearest ``.env`` once per process.
* :func:`resolve_socket_path` - precedence rules for the endpoint path.
* :func:`env_bool` - ``1/true/yes/on`` interpretation.
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from .adapters.journal_socket import DEFAULT_SOCKET_PATH

SOCKET_ENV_VAR = "JOURNAL_SOCKET"
DOTENV_ENV_VAR = "JOURNAL_USE_DOTENV"

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}

_dotenv_loaded = False
_dotenv_path: Path | None = None


def env_bool(name: str, default: bool) -> bool:
    """Return the boolean value of environment variable ``name``.

    Examples
    --------
    >>> os.environ["_JOURNAL_DOC_FLAG"] = "on"
    >>> env_bool("_JOURNAL_DOC_FLAG", False)
    True
    >>> del os.environ["_JOURNAL_DOC_FLAG"]
    >>> env_bool("_JOURNAL_DOC_FLAG", False)
    False
    """
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    candidate = raw.strip().lower()
    if candidate in _TRUTHY:
        return True
    if candidate in _FALSY:
        return False
    return default


def enable_dotenv() -> Path | None:
    """Load the nearest ``.env`` above the working directory.

    Existing environment variables are never overridden. Only the first call
    per process searches the filesystem; later calls return the cached result.

    Returns
    -------
    Path | None
        Resolved path of the loaded file, or ``None`` when none was found.
    """
    global _dotenv_loaded, _dotenv_path
    if _dotenv_loaded:
        return _dotenv_path
    _dotenv_loaded = True
    found = find_dotenv(usecwd=True)
    if not found:
        return None
    _dotenv_path = Path(found).resolve()
    load_dotenv(_dotenv_path, override=False)
    return _dotenv_path


def resolve_socket_path(explicit: str | None = None) -> str:
    """Return the endpoint path: ``explicit``, then the environment, then the default.

    Examples
    --------
    >>> resolve_socket_path("/tmp/journal.sock")
    '/tmp/journal.sock'
    """
    if explicit:
        return explicit
    from_env = os.getenv(SOCKET_ENV_VAR, "").strip()
    return from_env or DEFAULT_SOCKET_PATH


def _reset_dotenv_state_for_testing() -> None:
    global _dotenv_loaded, _dotenv_path
    _dotenv_loaded = False
    _dotenv_path = None


__all__ = [
    "DOTENV_ENV_VAR",
    "SOCKET_ENV_VAR",
    "enable_dotenv",
    "env_bool",
    "resolve_socket_path",
]
