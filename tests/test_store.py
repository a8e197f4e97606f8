import logging

from cuekit.models import INVALID_OFFSET, CueRecord
from cuekit.store import CueStore, index_cues


UNSORTED_SRT = (
    "1\n00:00:02,000 --> 00:00:03,000\nthird\n\n"
    "2\n00:00:00,000 --> 00:00:01,000\nfirst\n\n"
    "3\n00:00:01,000 --> 00:00:05,000\nsecond\n\n"
    "4\n00:00:01,000 --> 00:00:01,500\nsecond tie\n\n"
)


def test_index_cues_sorts_stably():
    records = [
        CueRecord(1000, 2000, "b"),
        CueRecord(0, 500, "a"),
        CueRecord(1000, 1500, "c"),
    ]
    cues = index_cues(records)
    assert [(cue.index, cue.text) for cue in cues] == [(0, "a"), (1, "b"), (2, "c")]


def test_index_cues_drops_empty_intervals():
    cues = index_cues([CueRecord(0, 0, "empty"), CueRecord(500, 100, "negative"), CueRecord(0, 1, "ok")])
    assert [cue.text for cue in cues] == ["ok"]
    assert cues[0].index == 0


def test_load_sorts_and_indexes():
    store = CueStore()
    assert store.load(UNSORTED_SRT) is True
    assert [cue.text for cue in store.cues] == ["first", "second", "second tie", "third"]
    assert [cue.index for cue in store.cues] == list(range(len(store)))
    starts = [cue.start for cue in store.cues]
    assert starts == sorted(starts)
    assert store.max_offset_ms == 5000


def test_load_without_auto_max_offset_keeps_override():
    store = CueStore()
    store.set_max_length(60000)
    assert store.load(UNSORTED_SRT, auto_max_offset=False)
    assert store.max_offset_ms == 60000


def test_load_filters_vtt_metadata():
    store = CueStore()
    assert store.load("WEBVTT\n\nNOTE hello\n\n00:01.000 --> 00:02.000\nHi\n")
    assert len(store) == 1
    assert store[0].text == "Hi"


def test_load_empty_document():
    store = CueStore()
    assert store.load("WEBVTT\n")
    assert store.cues == []
    assert store.max_offset_ms == 0


def test_failed_load_invalidates():
    store = CueStore()
    assert store.load(UNSORTED_SRT)
    assert store.load("garbage that is not a subtitle") is False
    assert store.cues == []
    assert store.max_offset_ms == INVALID_OFFSET


def test_set_max_length_is_unconditional():
    store = CueStore()
    store.load(UNSORTED_SRT)
    store.set_max_length(10)
    assert store.max_offset_ms == 10


def test_load_logs_loop_point(caplog):
    store = CueStore()
    with caplog.at_level(logging.INFO, logger="cuekit.store"):
        store.load(UNSORTED_SRT)
    assert "Loaded 4 cues (loops at 00:00:05.000)" in caplog.text
