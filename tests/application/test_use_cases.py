from __future__ import annotations

from typing import Callable

import pytest

from lib_journal_native.application.use_cases.emit_event import create_emit_event
from lib_journal_native.application.use_cases.shutdown import create_shutdown
from lib_journal_native.domain import (
    EncodingError,
    JournalConnectionError,
    JournalWriteError,
    LogEvent,
    assemble,
)


class _Recorder:
    def __init__(self) -> None:
        self.calls: list[str] = []
        self.sent: list[bytes] = []


class _FakeTransport:
    def __init__(
        self,
        recorder: _Recorder,
        *,
        connect_error: Exception | None = None,
        send_error: Exception | None = None,
    ) -> None:
        self.recorder = recorder
        self.connect_error = connect_error
        self.send_error = send_error
        self.connected = False

    def ensure_connected(self) -> None:
        self.recorder.calls.append("connect")
        if self.connect_error is not None:
            raise self.connect_error
        self.connected = True

    def send(self, payload: bytes) -> None:
        self.recorder.calls.append("send")
        if self.send_error is not None:
            raise self.send_error
        self.recorder.sent.append(payload)

    def is_connected(self) -> bool:
        return self.connected

    def shutdown(self) -> None:
        self.recorder.calls.append("shutdown")
        self.connected = False


EventFactory = Callable[..., LogEvent]


def test_emit_connects_then_sends_assembled_payload(event_factory: EventFactory) -> None:
    recorder = _Recorder()
    emit = create_emit_event(transport=_FakeTransport(recorder))
    event = event_factory(context={"request_id": "r-1"})

    size = emit(event)

    assert recorder.calls == ["connect", "send"]
    assert recorder.sent == [assemble(event)]
    assert size == len(assemble(event))


def test_emit_sends_one_datagram_per_event(event_factory: EventFactory) -> None:
    recorder = _Recorder()
    emit = create_emit_event(transport=_FakeTransport(recorder))

    emit(event_factory(message="one"))
    emit(event_factory(message="two"))

    assert len(recorder.sent) == 2
    assert recorder.sent[0].startswith(b"MESSAGE=one\n")
    assert recorder.sent[1].startswith(b"MESSAGE=two\n")


def test_encoding_failure_happens_before_any_io(event_factory: EventFactory) -> None:
    recorder = _Recorder()
    emit = create_emit_event(transport=_FakeTransport(recorder))

    with pytest.raises(EncodingError):
        emit(event_factory(message="\udcff"))

    assert recorder.calls == []


def test_connection_error_propagates_without_retry(event_factory: EventFactory) -> None:
    recorder = _Recorder()
    transport = _FakeTransport(recorder, connect_error=JournalConnectionError("no socket"))
    emit = create_emit_event(transport=transport)

    with pytest.raises(JournalConnectionError, match="no socket"):
        emit(event_factory())

    assert recorder.calls == ["connect"]


def test_write_error_does_not_block_later_events(event_factory: EventFactory) -> None:
    recorder = _Recorder()
    transport = _FakeTransport(recorder, send_error=JournalWriteError("buffer full"))
    emit = create_emit_event(transport=transport)

    with pytest.raises(JournalWriteError):
        emit(event_factory(message="first"))

    transport.send_error = None
    emit(event_factory(message="second"))

    assert recorder.sent[0].startswith(b"MESSAGE=second\n")
    assert transport.is_connected()


def test_shutdown_closes_transport() -> None:
    recorder = _Recorder()
    transport = _FakeTransport(recorder)
    transport.connected = True

    create_shutdown(transport=transport)()

    assert recorder.calls == ["shutdown"]
    assert not transport.is_connected()


def test_shutdown_without_transport_is_noop() -> None:
    create_shutdown(transport=None)()
