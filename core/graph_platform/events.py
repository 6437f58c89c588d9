"""
    Observer event names fired by ``GraphPlatform``.

    Components that edit the model on the platform's behalf (pointer
    controller, renderer) receive the platform's notify callback and
    fire the same events.
"""
from typing import Any, Callable

NotifyCallback = Callable[..., None]

EVENT_NODE_ADDED = "node_added"
EVENT_NODE_REMOVED = "node_removed"
EVENT_EDGE_ADDED = "edge_added"
EVENT_EDGE_REMOVED = "edge_removed"
EVENT_MOTION_STARTED = "motion_started"
EVENT_MOTION_STOPPED = "motion_stopped"


def ignore(event: str, **kwargs: Any) -> None:
    """Notify callback used when a component runs without a platform."""
