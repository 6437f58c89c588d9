"""
    Generic base for graph traversals.

    Design Pattern: Template Method
    ─────────────────────────────────
    Defines the skeleton of a traversal (seed root → take next → mark →
    record → expand neighbours), letting concrete subclasses decide
    which container holds the frontier and in which order neighbours
    enter it.

    Genericity:
    ─────────────────────────
    Uses Generic[TFrontier] so each traversal declares its container
    type (Stack for depth-first, Queue for breadth-first).
"""
from abc import ABC, abstractmethod
from typing import Generic, List, Set, TypeVar

from graph_api.models.graph import GraphModel
from graph_api.models.motion import MotionStep
from graph_api.types import Label

# Generic type variable for the frontier container
TFrontier = TypeVar('TFrontier')


class GraphTraversal(ABC, Generic[TFrontier]):
    """
    Abstract generic base for traversals producing visited-edge steps.

    Concrete subclasses must implement:
        - _make_frontier()              → empty container
        - _put(frontier, step)          → add one pending step
        - _take(frontier)               → remove the next pending step
        - _is_empty(frontier)           → whether any step is pending
        - _order(neighbours)            → order in which neighbours enter
    """

    name: str = ""

    def execute(self, graph: GraphModel, start: Label) -> List[MotionStep]:
        """
        Template Method: traverse from ``start`` and return the steps.

        Each label is recorded at most once. The synthetic root entry
        is dropped, so an isolated or unknown start yields ``[]``.
        Every returned step has ``step == 0``.
        """
        adjacency = graph.adjacency()
        visited: Set[Label] = set()
        steps: List[MotionStep] = []
        frontier = self._make_frontier()
        self._put(frontier, MotionStep(target=start))

        while not self._is_empty(frontier):
            current = self._take(frontier)
            if current.target in visited:
                continue

            visited.add(current.target)
            steps.append(current)
            for neighbour in self._order(sorted(adjacency.get(current.target, {}))):
                self._put(frontier, MotionStep(target=neighbour, source=current.target))

        return [step for step in steps if not step.is_root]

    @abstractmethod
    def _make_frontier(self) -> TFrontier:
        ...

    @abstractmethod
    def _put(self, frontier: TFrontier, step: MotionStep) -> None:
        ...

    @abstractmethod
    def _take(self, frontier: TFrontier) -> MotionStep:
        ...

    @abstractmethod
    def _is_empty(self, frontier: TFrontier) -> bool:
        ...

    def _order(self, neighbours: List[Label]) -> List[Label]:
        """Neighbours arrive ascending; override to change entry order."""
        return neighbours
