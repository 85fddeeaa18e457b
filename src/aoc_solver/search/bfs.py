"""Breadth-first search over a lazily expanded state graph.

Every edge has unit weight, so the first time a state is dequeued it is at
its shortest distance from the start. Successors are enqueued without any
seen check and duplicates are dropped when they reach the front of the
queue. This shortcut is only valid for unit weights; weighted graphs must go
through :mod:`aoc_solver.search.dijkstra`.
"""

import logging
from collections import deque
from typing import Callable, Deque, Hashable, Iterable, List, Optional, Set, Tuple, TypeVar

from .result import Distance, SearchResult, SeenState

logger = logging.getLogger(__name__)

S = TypeVar('S', bound=Hashable)


def search(
    initial_state: S,
    get_next_states: Callable[[S], Iterable[S]],
    is_goal: Callable[[S], bool],
) -> SearchResult[S]:
    """Find a shortest path, by edge count, to any goal state.

    Args:
        initial_state: State the search starts from
        get_next_states: Returns the successors of a state
        is_goal: Predicate marking goal states

    Returns:
        SearchResult holding every finalized state. ``goal_state()`` is None
        if no goal state is reachable.
    """
    seen_states: List[SeenState[S]] = []
    finalized: Set[S] = set()
    pending: Deque[Tuple[S, Distance, Optional[int]]] = deque()
    pending.append((initial_state, 0, None))
    reached_goal = False
    duplicates = 0

    while pending:
        state, distance, prev_index = pending.popleft()
        if state in finalized:
            duplicates += 1
            continue

        seen_states.append(SeenState(state, distance, prev_index))
        if is_goal(state):
            reached_goal = True
            break

        finalized.add(state)
        index = len(seen_states) - 1
        for next_state in get_next_states(state):
            pending.append((next_state, distance + 1, index))

    logger.debug(
        f"BFS finished: {len(seen_states)} states finalized, "
        f"{duplicates} duplicates skipped, reached_goal={reached_goal}"
    )
    return SearchResult(seen_states, reached_goal)
