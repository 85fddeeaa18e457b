"""Generic graph search for puzzle solvers.

Callers describe a graph implicitly: an initial state, a function producing
the successors of a state, and a goal predicate. Two engines share one result
model:

- :func:`bfs.search` for unit-weight edges
- :func:`dijkstra.search` for non-negative integer edge weights
"""

from . import bfs, dijkstra
from .result import Distance, SearchResult, SeenState

__all__ = [
    'bfs',
    'dijkstra',
    'Distance',
    'SearchResult',
    'SeenState',
]
