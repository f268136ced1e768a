"""Notification Sinks: logging, bounded recording, and fan-out delivery.

Tests cover:
    - LoggingNotificationSink writes one INFO record with event extras
    - RecordingNotificationSink drops oldest events beyond capacity
    - recent(limit) returns the newest events, oldest first
    - FanOutNotificationSink keeps delivering after a sink raises
"""

import logging

from tokenregistry.core.domain_types import Identity, TokenId
from tokenregistry.core.events import BurnToken, NewToken, NotTransferable
from tokenregistry.infrastructure.notifications import (
    FanOutNotificationSink, LoggingNotificationSink, RecordingNotificationSink,
)


class _BrokenSink:
    def notify(self, event):
        raise RuntimeError("boom")


# --- LoggingNotificationSink --------------------------------------------------

def test_logging_sink_writes_info_record(caplog):
    sink = LoggingNotificationSink()
    with caplog.at_level(logging.INFO, logger="tokenregistry.infrastructure.notifications"):
        sink.notify(NewToken(Identity("alice"), TokenId(3), "hi"))
    [record] = caplog.records
    assert record.levelno == logging.INFO
    assert record.event_kind == "NewToken"
    assert record.token_id == 3
    assert record.owner == "alice"


def test_logging_sink_handles_event_without_owner(caplog):
    sink = LoggingNotificationSink()
    with caplog.at_level(logging.INFO, logger="tokenregistry.infrastructure.notifications"):
        sink.notify(NotTransferable("nope"))
    [record] = caplog.records
    assert record.event_kind == "NotTransferable"
    assert record.token_id is None


# --- RecordingNotificationSink ------------------------------------------------

def test_recording_sink_keeps_order():
    sink = RecordingNotificationSink()
    sink.notify(BurnToken(TokenId(1)))
    sink.notify(BurnToken(TokenId(2)))
    assert sink.recent() == [BurnToken(TokenId(1)), BurnToken(TokenId(2))]


def test_recording_sink_is_bounded():
    sink = RecordingNotificationSink(capacity=3)
    for i in range(5):
        sink.notify(BurnToken(TokenId(i)))
    assert [e.token_id for e in sink.recent()] == [2, 3, 4]


def test_recent_limit_returns_newest():
    sink = RecordingNotificationSink()
    for i in range(5):
        sink.notify(BurnToken(TokenId(i)))
    assert [e.token_id for e in sink.recent(2)] == [3, 4]
    assert sink.recent(0) == []


def test_clear_empties_buffer():
    sink = RecordingNotificationSink()
    sink.notify(BurnToken(TokenId(0)))
    sink.clear()
    assert sink.recent() == []


# --- FanOutNotificationSink ---------------------------------------------------

def test_fan_out_delivers_to_all():
    first, second = RecordingNotificationSink(), RecordingNotificationSink()
    FanOutNotificationSink([first, second]).notify(BurnToken(TokenId(0)))
    assert first.recent() == second.recent() == [BurnToken(TokenId(0))]


def test_fan_out_survives_broken_sink(caplog):
    recorder = RecordingNotificationSink()
    fan_out = FanOutNotificationSink([_BrokenSink(), recorder])
    with caplog.at_level(logging.ERROR):
        fan_out.notify(BurnToken(TokenId(0)))
    assert recorder.recent() == [BurnToken(TokenId(0))]
    assert any("_BrokenSink" in r.getMessage() for r in caplog.records)
