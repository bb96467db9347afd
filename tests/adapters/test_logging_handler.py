from __future__ import annotations

import inspect
import logging
from typing import Iterator

import pytest

from lib_journal_native.adapters.journal_socket import JournalSocket
from lib_journal_native.adapters.logging_handler import DEFAULT_FORMAT, JournalHandler
from lib_journal_native.domain.errors import JournalConnectionError
from tests.os_markers import OS_AGNOSTIC
from tests.wire import decode_fields

pytestmark = [OS_AGNOSTIC]


class _MemoryTransport:
    def __init__(self, *, connect_error: Exception | None = None) -> None:
        self.connect_error = connect_error
        self.connects = 0
        self.connected = False
        self.sent: list[bytes] = []
        self.shutdowns = 0

    def ensure_connected(self) -> None:
        if self.connected:
            return
        self.connects += 1
        if self.connect_error is not None:
            raise self.connect_error
        self.connected = True

    def send(self, payload: bytes) -> None:
        self.sent.append(payload)

    def is_connected(self) -> bool:
        return self.connected

    def shutdown(self) -> None:
        self.shutdowns += 1
        self.connected = False


@pytest.fixture
def transport() -> _MemoryTransport:
    return _MemoryTransport()


@pytest.fixture
def handler(transport: _MemoryTransport) -> Iterator[JournalHandler]:
    handler = JournalHandler(transport=transport)
    yield handler
    handler.close()


@pytest.fixture
def logger(handler: JournalHandler) -> Iterator[logging.Logger]:
    logger = logging.getLogger("MyLogger")
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    logger.addHandler(handler)
    yield logger
    logger.removeHandler(handler)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


def test_default_handler_owns_journal_socket() -> None:
    handler = JournalHandler("/run/custom.sock")
    assert isinstance(handler.transport, JournalSocket)
    assert handler.transport.path == "/run/custom.sock"
    assert not handler.is_connected()


def test_plain_message_formatter_matches_reference_payload(
    logger: logging.Logger, handler: JournalHandler, transport: _MemoryTransport
) -> None:
    handler.setFormatter(logging.Formatter("%(message)s"))

    logger.info("Hello")

    assert transport.sent == [b"MESSAGE=Hello\nPRIORITY=6\nSYSLOG_IDENTIFIER=MyLogger\n"]


def test_default_format_prefixes_level_name(logger: logging.Logger, transport: _MemoryTransport) -> None:
    logger.warning("disk %s%% full", 91)

    fields = dict(decode_fields(transport.sent[0]))
    assert DEFAULT_FORMAT == "%(levelname)s: %(message)s"
    assert fields["MESSAGE"] == b"WARNING: disk 91% full"
    assert fields["PRIORITY"] == b"4"


def test_extra_attributes_become_fields(logger: logging.Logger, transport: _MemoryTransport) -> None:
    logger.error("failed", extra={"request_id": "r-1", "attempt": 2, "tags": ["a"]})

    assert decode_fields(transport.sent[0])[3:] == [("REQUEST_ID", b"r-1"), ("ATTEMPT", b"2")]


def test_logged_exception_adds_code_location_and_framed_message(
    logger: logging.Logger, transport: _MemoryTransport
) -> None:
    line = inspect.currentframe().f_lineno + 2
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        logger.exception("operation failed")

    fields = decode_fields(transport.sent[0])
    names = [name for name, _ in fields]
    values = dict(fields)
    assert names == ["MESSAGE", "PRIORITY", "SYSLOG_IDENTIFIER", "CODE_FILE", "CODE_LINE"]
    assert values["MESSAGE"].startswith(b"ERROR: operation failed\nTraceback")
    assert transport.sent[0].startswith(b"MESSAGE\n")
    assert values["CODE_FILE"] == __file__.encode()
    assert values["CODE_LINE"] == str(line).encode()


def test_level_gating_is_left_to_logging(handler: JournalHandler, logger: logging.Logger, transport: _MemoryTransport) -> None:
    handler.setLevel(logging.WARNING)

    logger.info("quiet")
    logger.critical("loud")

    assert len(transport.sent) == 1
    assert dict(decode_fields(transport.sent[0]))["PRIORITY"] == b"2"


def test_connects_once_across_records(logger: logging.Logger, transport: _MemoryTransport) -> None:
    logger.info("one")
    logger.info("two")

    assert transport.connects == 1
    assert len(transport.sent) == 2


def test_delivery_failure_is_routed_to_handle_error(monkeypatch: pytest.MonkeyPatch) -> None:
    transport = _MemoryTransport(connect_error=JournalConnectionError("no journal"))
    handler = JournalHandler(transport=transport)
    failures: list[logging.LogRecord] = []
    monkeypatch.setattr(handler, "handleError", failures.append)
    record = logging.LogRecord("MyLogger", logging.INFO, __file__, 1, "Hello", (), None)

    handler.emit(record)
    handler.emit(record)

    assert failures == [record, record]
    assert transport.connects == 2


def test_own_package_records_are_not_forwarded(handler: JournalHandler, transport: _MemoryTransport) -> None:
    for name in ("lib_journal_native", "lib_journal_native.adapters.journal_socket"):
        handler.emit(logging.LogRecord(name, logging.ERROR, __file__, 1, "internal", (), None))

    handler.emit(logging.LogRecord("lib_journal_native_app", logging.ERROR, __file__, 1, "app", (), None))

    assert len(transport.sent) == 1


def test_close_shuts_transport_down(transport: _MemoryTransport) -> None:
    handler = JournalHandler(transport=transport)
    transport.ensure_connected()

    handler.close()

    assert transport.shutdowns == 1
    assert not handler.is_connected()


def test_default_format_keeps_extras_out_of_message(logger: logging.Logger, transport: _MemoryTransport) -> None:
    logger.info("saved", extra={"user": "ada"})

    fields = dict(decode_fields(transport.sent[0]))
    assert fields["MESSAGE"] == b"INFO: saved"
    assert fields["USER"] == b"ada"
