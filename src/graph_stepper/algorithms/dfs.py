"""
Depth-first traversal narrated as a sequence of Steps.

The traversal is written with an explicit frame stack instead of recursion so
that long paths do not exhaust the interpreter's recursion limit. Each frame
keeps its own neighbor cursor, which reproduces the step order of the
recursive formulation exactly.
"""

import logging
from typing import List, Sequence, Set

from ..adjacency import AdjacencyMap, build_adjacency, incident_edges
from ..models import Node, Edge, NodeState, Step
from .recorder import StepRecorder

logger = logging.getLogger(__name__)


class _Frame:
    __slots__ = ("node_id", "cursor")

    def __init__(self, node_id: str):
        self.node_id = node_id
        self.cursor = 0


def _next_unvisited(frame: _Frame, adjacency: AdjacencyMap, visited: Set[str], recorder: StepRecorder):
    """Advance the frame's cursor to its next unvisited known neighbor."""
    neighbors = adjacency[frame.node_id]
    while frame.cursor < len(neighbors):
        neighbor = neighbors[frame.cursor]
        frame.cursor += 1
        if neighbor not in visited and recorder.is_node(neighbor):
            return neighbor
    return None


def run_dfs(nodes: Sequence[Node], edges: Sequence[Edge], start_node_id: str) -> List[Step]:
    """
    Generate the DFS step sequence from start_node_id.

    Every node gets a "Visiting" step on the way down and a distinct
    "Backtracking" step once its neighbors are exhausted. The node being
    visited is the only CURRENT node; its parent is shown VISITED while the
    traversal is below it.

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
    visited: Set[str] = set()
    stack: List[_Frame] = []

    def enter(node_id: str) -> None:
        visited.add(node_id)
        recorder.set_state(node_id, NodeState.CURRENT)
        recorder.emit(
            f"Visiting node {recorder.label(node_id)}",
            edge_states=incident_edges(edges, node_id),
            current_node=node_id,
        )
        stack.append(_Frame(node_id))

    recorder.emit(f"Starting DFS from node {recorder.label(start_node_id)}")

    if recorder.is_node(start_node_id):
        enter(start_node_id)
    else:
        logger.debug(f"Start node {start_node_id!r} is not in the graph; nothing to traverse")

    while stack:
        frame = stack[-1]
        neighbor = _next_unvisited(frame, adjacency, visited, recorder)
        if neighbor is not None:
            recorder.set_state(frame.node_id, NodeState.VISITED)
            enter(neighbor)
            continue

        stack.pop()
        recorder.set_state(frame.node_id, NodeState.VISITED)
        recorder.emit(f"Backtracking from node {recorder.label(frame.node_id)}")

    recorder.emit("DFS traversal complete!")

    logger.debug(f"DFS from {start_node_id!r} visited {len(visited)} nodes in {len(recorder.steps)} steps")
    return recorder.steps
