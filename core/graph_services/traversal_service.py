"""
    Traversal service — depth-first and breadth-first search over a GraphModel.

    Both algorithms run to completion synchronously and return the
    ordered list of visited edges as ``MotionStep`` values ready for
    playback.
"""
import logging
from typing import Dict, List, Type

from graph_api.models.graph import GraphModel
from graph_api.models.motion import MotionStep
from graph_api.structures import Queue, Stack
from graph_api.types import Label

from .base_service import GraphTraversal
from .exceptions import UnknownTraversalError

logger = logging.getLogger(__name__)


class DepthFirstTraversal(GraphTraversal[Stack[MotionStep]]):
    """
    Explicit-stack depth-first search.

    Neighbours are pushed in reverse so that, popped LIFO, they are
    visited in ascending label order.
    """

    name = "dfs"

    def _make_frontier(self) -> Stack[MotionStep]:
        return Stack()

    def _put(self, frontier: Stack[MotionStep], step: MotionStep) -> None:
        frontier.push(step)

    def _take(self, frontier: Stack[MotionStep]) -> MotionStep:
        return frontier.pop()

    def _is_empty(self, frontier: Stack[MotionStep]) -> bool:
        return frontier.empty()

    def _order(self, neighbours: List[Label]) -> List[Label]:
        return list(reversed(neighbours))


class BreadthFirstTraversal(GraphTraversal[Queue[MotionStep]]):
    """Queue-based breadth-first search; neighbours enter ascending."""

    name = "bfs"

    def _make_frontier(self) -> Queue[MotionStep]:
        return Queue()

    def _put(self, frontier: Queue[MotionStep], step: MotionStep) -> None:
        frontier.enqueue(step)

    def _take(self, frontier: Queue[MotionStep]) -> MotionStep:
        return frontier.dequeue()

    def _is_empty(self, frontier: Queue[MotionStep]) -> bool:
        return frontier.empty()


class TraversalEngine:
    """
    Registry of traversal algorithms, looked up by short name.

    Usage:
        engine = TraversalEngine()
        steps = engine.run("bfs", graph, 1)
    """

    _registry: Dict[str, Type[GraphTraversal]] = {
        DepthFirstTraversal.name: DepthFirstTraversal,
        BreadthFirstTraversal.name: BreadthFirstTraversal,
    }

    def names(self) -> List[str]:
        return sorted(self._registry)

    def run(self, name: str, graph: GraphModel, start: Label) -> List[MotionStep]:
        """
        Run the named traversal from ``start``.

        Raises:
            UnknownTraversalError: If ``name`` is not registered.
        """
        traversal_cls = self._registry.get(name.lower())
        if traversal_cls is None:
            raise UnknownTraversalError(
                f"Unknown traversal '{name}'. Available: {self.names()}"
            )
        steps = traversal_cls().execute(graph, start)
        logger.debug("%s from %s visited %d edge(s)", name, start, len(steps))
        return steps

    def deep_first_search(self, graph: GraphModel, start: Label) -> List[MotionStep]:
        return self.run(DepthFirstTraversal.name, graph, start)

    def breadth_first_search(self, graph: GraphModel, start: Label) -> List[MotionStep]:
        return self.run(BreadthFirstTraversal.name, graph, start)
