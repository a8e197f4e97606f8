from cuekit.models import IndexedCue
from cuekit.tracker import ActivationTracker, diff_active_cues, find_active_cues


CUES = [
    IndexedCue(0, 0, 1000, "A"),
    IndexedCue(1, 500, 1500, "overlap"),
    IndexedCue(2, 1000, 2000, "B"),
]


def test_active_interval_is_half_open():
    assert [c.text for c in find_active_cues(0, CUES)] == ["A"]
    assert [c.text for c in find_active_cues(999.5, CUES)] == ["A", "overlap"]
    assert [c.text for c in find_active_cues(1000, CUES)] == ["overlap", "B"]
    assert find_active_cues(2000, CUES) == []


def test_diff_begins_only_unfired():
    transition = diff_active_cues(600, CUES, frozenset({0}))
    assert transition.ended == []
    assert [c.index for c in transition.began] == [1]
    assert transition.fired == frozenset({0, 1})


def test_diff_ends_lookup_by_index():
    transition = diff_active_cues(1200, CUES, frozenset({0, 1}))
    assert [c.text for c in transition.ended] == ["A"]
    assert [c.text for c in transition.began] == ["B"]
    assert transition.fired == frozenset({1, 2})


def test_diff_unchanged_keeps_fired_set():
    fired = frozenset({0})
    transition = diff_active_cues(100, CUES, fired)
    assert not transition.changed
    assert transition.fired == fired


def test_diff_replaces_stale_fired_set_wholesale():
    # Index 2 is not active at 100 and gets ended; 0 is kept active
    transition = diff_active_cues(100, CUES, frozenset({0, 2}))
    assert [c.index for c in transition.ended] == [2]
    assert transition.began == []
    assert transition.fired == frozenset({0})


def test_tracker_apply_and_clear():
    tracker = ActivationTracker()
    first = tracker.apply(0, CUES)
    assert [c.text for c in first.began] == ["A"]
    assert tracker.fired_cues == frozenset({0})

    assert not tracker.apply(10, CUES).changed

    tracker.clear()
    assert tracker.fired_cues == frozenset()
    again = tracker.apply(20, CUES)
    assert [c.text for c in again.began] == ["A"]
    assert again.ended == []


def test_indexed_cue_is_active():
    cue = IndexedCue(0, 1000, 2000, "x")
    assert cue.is_active(1000)
    assert cue.is_active(1999.9)
    assert not cue.is_active(2000)
    assert not cue.is_active(999)
