"""Shared result model for the graph search engines.

Both engines record every state they finalize, in the order they finalize
it, together with the index of the record for its predecessor. Any path can
therefore be rebuilt by walking those indices back to the initial state.
"""

from dataclasses import dataclass, field
from typing import Generic, Hashable, Iterator, List, Optional, TypeVar

S = TypeVar('S', bound=Hashable)

# Distances are non-negative integers.
Distance = int


@dataclass(frozen=True)
class SeenState(Generic[S]):
    """A state whose shortest distance from the start has been fixed."""
    state: S
    distance: Distance
    prev_index: Optional[int] = None  # index into SearchResult.seen_states


@dataclass(frozen=True)
class SearchResult(Generic[S]):
    """Every state finalized by a search, in finalization order.

    If the goal was reached, its record is always the last one: the engines
    stop as soon as a goal state is finalized.
    """
    seen_states: List[SeenState[S]] = field(default_factory=list)
    reached_goal: bool = False

    def goal_state(self) -> Optional[SeenState[S]]:
        """Get the record of the goal state, or None if it was never reached."""
        if self.reached_goal:
            return self.seen_states[-1]
        return None

    def distance_to_goal(self) -> Optional[Distance]:
        """Get the goal's distance from the initial state, if reached."""
        goal = self.goal_state()
        return goal.distance if goal is not None else None

    def path_to_goal(self) -> Optional[List[S]]:
        """Get the states from the initial state to the goal, inclusive."""
        goal = self.goal_state()
        if goal is None:
            return None
        return self.path_to(goal)

    def path_to(self, seen_state: SeenState[S]) -> List[S]:
        """Rebuild the path from the initial state to any finalized state.

        Args:
            seen_state: A record taken from this result's seen_states

        Returns:
            States from the initial state to seen_state, inclusive
        """
        path = [seen_state.state]
        while seen_state.prev_index is not None:
            seen_state = self.seen_states[seen_state.prev_index]
            path.append(seen_state.state)
        path.reverse()
        return path

    def states(self) -> List[S]:
        """Get all finalized states in the order they were finalized."""
        return [seen.state for seen in self.seen_states]

    def __len__(self) -> int:
        return len(self.seen_states)

    def __iter__(self) -> Iterator[SeenState[S]]:
        return iter(self.seen_states)

