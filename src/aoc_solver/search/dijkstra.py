"""Uniform-cost (Dijkstra) search over a lazily expanded weighted graph.

States live in an arena of tracked records indexed by discovery order. The
heap holds ``(distance, tracked_index)`` pairs, so equal distances pop in
discovery order and repeated searches finalize states in the same order.
Improved distances are pushed as new entries; the superseded entries stay in
the heap and are skipped when popped.
"""

import heapq
import logging
from dataclasses import dataclass
from typing import Callable, Dict, Hashable, Iterable, List, Optional, Tuple, TypeVar

from .result import Distance, SearchResult, SeenState

logger = logging.getLogger(__name__)

S = TypeVar('S', bound=Hashable)


@dataclass
class _TrackedState:
    """Bookkeeping for a discovered state."""
    state: Hashable
    distance: Distance
    prev_index: Optional[int]  # tracked index of the best known predecessor
    seen_index: Optional[int] = None  # set once the state is finalized


def search(
    initial_state: S,
    get_next_states: Callable[[S], Iterable[Tuple[S, Distance]]],
    is_goal: Callable[[S], bool],
) -> SearchResult[S]:
    """Find a minimum total weight path to any goal state.

    Args:
        initial_state: State the search starts from
        get_next_states: Returns ``(successor, weight)`` pairs for a state.
            Weights must be non-negative integers.
        is_goal: Predicate marking goal states

    Returns:
        SearchResult holding every finalized state. ``goal_state()`` is None
        if no goal state is reachable.
    """
    tracked: List[_TrackedState] = [_TrackedState(initial_state, 0, None)]
    tracked_indices: Dict[S, int] = {initial_state: 0}
    pending: List[Tuple[Distance, int]] = [(0, 0)]
    seen_states: List[SeenState[S]] = []
    reached_goal = False
    stale = 0

    while pending:
        distance, index = heapq.heappop(pending)
        current = tracked[index]
        if distance > current.distance:
            stale += 1
            continue

        prev_seen_index = None
        if current.prev_index is not None:
            prev_seen_index = tracked[current.prev_index].seen_index
        seen_states.append(SeenState(current.state, distance, prev_seen_index))
        current.seen_index = len(seen_states) - 1
        if is_goal(current.state):
            reached_goal = True
            break

        for next_state, weight in get_next_states(current.state):
            next_distance = distance + weight
            known_index = tracked_indices.get(next_state)
            if known_index is None:
                tracked.append(_TrackedState(next_state, next_distance, index))
                next_index = len(tracked) - 1
                tracked_indices[next_state] = next_index
                heapq.heappush(pending, (next_distance, next_index))
            elif next_distance < tracked[known_index].distance:
                known = tracked[known_index]
                known.distance = next_distance
                known.prev_index = index
                heapq.heappush(pending, (next_distance, known_index))

    logger.debug(
        f"Dijkstra finished: {len(seen_states)} states finalized, "
        f"{len(tracked)} discovered, {stale} stale entries skipped, "
        f"reached_goal={reached_goal}"
    )
    return SearchResult(seen_states, reached_goal)
