"""
Breadth-first traversal narrated as a sequence of Steps.
"""

import logging
from collections import deque
from typing import List, Sequence, Set

from ..adjacency import build_adjacency, incident_edges
from ..models import Node, Edge, NodeState, Step
from .recorder import StepRecorder

logger = logging.getLogger(__name__)


def run_bfs(nodes: Sequence[Node], edges: Sequence[Edge], start_node_id: str) -> List[Step]:
    """
    Generate the BFS step sequence from start_node_id.

    Only the component containing the start node is traversed; every other
    node stays DEFAULT. Nodes are shown VISITED as soon as they are queued.

    Args:
        nodes: Graph nodes
        edges: Graph edges, treated as undirected
        start_node_id: Id of the node to start from

    Returns:
        Fully materialized list of Steps, empty if there are no nodes
    """
    if not nodes:
        return []

    adjacency = build_adjacency(nodes, edges)
    recorder = StepRecorder(nodes)

    recorder.emit(f"Starting BFS from node {recorder.label(start_node_id)}")

    visited: Set[str] = set()
    queue = deque()
    if recorder.is_node(start_node_id):
        visited.add(start_node_id)
        queue.append(start_node_id)
    else:
        logger.debug(f"Start node {start_node_id!r} is not in the graph; nothing to traverse")

    while queue:
        current = queue.popleft()
        recorder.set_state(current, NodeState.CURRENT)
        recorder.emit(
            f"Visiting node {recorder.label(current)}",
            edge_states=incident_edges(edges, current),
            current_node=current,
        )

        for neighbor in adjacency[current]:
            if neighbor not in visited and recorder.is_node(neighbor):
                visited.add(neighbor)
                queue.append(neighbor)
                recorder.set_state(neighbor, NodeState.VISITED)

        recorder.set_state(current, NodeState.VISITED)

    recorder.emit("BFS traversal complete!")

    logger.debug(f"BFS from {start_node_id!r} visited {len(visited)} nodes in {len(recorder.steps)} steps")
    return recorder.steps
