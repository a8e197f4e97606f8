"""
Cue activation tracking for CueKit.

Converts a playback offset into edge-triggered begin/end transitions by
diffing the cues active at that offset against the set of cue indices that
were active at the previous evaluation (the fired set).
"""

import logging
from dataclasses import dataclass, field
from typing import AbstractSet, FrozenSet, List, Sequence

from .models import IndexedCue

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CueTransition:
    """Result of one activation diff."""
    ended: List[IndexedCue] = field(default_factory=list)
    began: List[IndexedCue] = field(default_factory=list)
    fired: FrozenSet[int] = frozenset()

    @property
    def changed(self) -> bool:
        return bool(self.ended or self.began)


def find_active_cues(offset: float, cues: Sequence[IndexedCue]) -> List[IndexedCue]:
    """
    Return the cues whose ``[start, end)`` interval contains ``offset``.

    ``cues`` must be sorted by start time, as loaded by CueStore.

    Example:
        >>> cues = [IndexedCue(0, 0, 1000, "a"), IndexedCue(1, 1000, 2000, "b")]
        >>> [c.text for c in find_active_cues(1000, cues)]
        ['b']
    """
    active = []
    for cue in cues:
        if cue.start > offset:
            break
        if cue.is_active(offset):
            active.append(cue)
    return active


def diff_active_cues(
    offset: float,
    cues: Sequence[IndexedCue],
    fired: AbstractSet[int]
) -> CueTransition:
    """
    Diff the cues active at ``offset`` against the previously fired indices.

    Args:
        offset: Playback offset in milliseconds
        cues: Loaded cue list, sorted and indexed
        fired: Indices active at the previous evaluation

    Returns:
        CueTransition with ended and began cues in index order. When nothing
        changed the fired set is returned as is; otherwise it is replaced by
        the indices of the currently active cues.
    """
    active = find_active_cues(offset, cues)
    active_indices = frozenset(cue.index for cue in active)

    began = [cue for cue in active if cue.index not in fired]
    ended = [cues[index] for index in sorted(fired) if index not in active_indices]

    if not began and not ended:
        return CueTransition(fired=frozenset(fired))

    return CueTransition(ended=ended, began=began, fired=active_indices)


class ActivationTracker:
    """
    Stateful wrapper around diff_active_cues.

    Keeps the fired set between evaluations of one loaded cue list.
    """

    def __init__(self):
        self.fired_cues: FrozenSet[int] = frozenset()

    def apply(self, offset: float, cues: Sequence[IndexedCue]) -> CueTransition:
        """
        Evaluate ``offset`` and update the fired set.

        Returns:
            The transition to dispatch, ends before begins
        """
        transition = diff_active_cues(offset, cues, self.fired_cues)
        if transition.changed:
            logger.debug(
                f"Offset {offset:.3f}ms: {len(transition.ended)} ended, "
                f"{len(transition.began)} began"
            )
            self.fired_cues = transition.fired
        return transition

    def clear(self) -> None:
        """Forget the fired set without producing end transitions."""
        self.fired_cues = frozenset()
