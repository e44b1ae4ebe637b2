"""
Articulation point (cut vertex) detection narrated as a sequence of Steps.

Uses discovery-time / low-link bookkeeping over every connected component:

- a root of the DFS forest is a cut vertex when it has more than one child;
- any other node u is a cut vertex when some child v has low[v] >= disc[u],
  i.e. v's subtree cannot reach above u without passing through it.

The DFS runs on an explicit frame stack. A frame remembers the child it
descended into so the low-link update and cut-vertex checks run when the
traversal resumes that frame, in the same order as the recursive version.
"""

import logging
from typing import Dict, List, Optional, Sequence, Set

from ..adjacency import AdjacencyMap, build_adjacency
from ..models import Node, Edge, NodeState, Step
from .recorder import StepRecorder

logger = logging.getLogger(__name__)


class _Frame:
    __slots__ = ("node_id", "parent", "cursor", "children", "pending_child")

    def __init__(self, node_id: str, parent: Optional[str]):
        self.node_id = node_id
        self.parent = parent
        self.cursor = 0
        self.children = 0
        self.pending_child: Optional[str] = None


class _LowLinkSearch:
    """Traversal context for one run: disc/low/parent maps and the step recorder."""

    def __init__(self, nodes: Sequence[Node], adjacency: AdjacencyMap):
        self.adjacency = adjacency
        self.recorder = StepRecorder(nodes)
        self.visited: Set[str] = set()
        self.disc: Dict[str, int] = {}
        self.low: Dict[str, int] = {}
        self.parent: Dict[str, Optional[str]] = {}
        # Insertion-ordered set: the summary lists points in the order they were found
        self.articulation_points: Dict[str, None] = {}
        self.time = 0

    def run_component(self, root: str) -> None:
        stack: List[_Frame] = [self._enter(root, None)]

        while stack:
            frame = stack[-1]
            u = frame.node_id

            if frame.pending_child is not None:
                self._after_child(frame, frame.pending_child)
                frame.pending_child = None

            child = self._advance(frame)
            if child is not None:
                frame.children += 1
                frame.pending_child = child
                self.recorder.set_state(u, NodeState.VISITED)
                stack.append(self._enter(child, u))
                continue

            stack.pop()
            self._finish(u)

    def _enter(self, u: str, parent: Optional[str]) -> _Frame:
        self.visited.add(u)
        self.parent[u] = parent
        self.time += 1
        self.disc[u] = self.low[u] = self.time
        self.recorder.set_state(u, NodeState.CURRENT)
        self.recorder.emit(
            f"Visiting {self.recorder.label(u)} (disc={self.disc[u]}, low={self.low[u]})",
            current_node=u,
        )
        return _Frame(u, parent)

    def _advance(self, frame: _Frame) -> Optional[str]:
        """Scan neighbors from the frame's cursor; return the next tree child, folding back edges into low."""
        u = frame.node_id
        neighbors = self.adjacency[u]
        while frame.cursor < len(neighbors):
            v = neighbors[frame.cursor]
            frame.cursor += 1
            if not self.recorder.is_node(v):
                continue
            if v not in self.visited:
                return v
            if v != self.parent[u]:
                self.low[u] = min(self.low[u], self.disc[v])
        return None

    def _after_child(self, frame: _Frame, v: str) -> None:
        u = frame.node_id
        self.low[u] = min(self.low[u], self.low[v])

        if self.parent[u] is None and frame.children > 1:
            self._flag(u)
        if self.parent[u] is not None and self.low[v] >= self.disc[u]:
            self._flag(u)

    def _flag(self, u: str) -> None:
        if u not in self.articulation_points:
            logger.debug(f"Articulation point found: {u!r} (disc={self.disc[u]}, low={self.low[u]})")
        self.articulation_points[u] = None

    def _finish(self, u: str) -> None:
        label = self.recorder.label(u)
        if u in self.articulation_points:
            self.recorder.set_state(u, NodeState.ARTICULATION)
            self.recorder.emit(f"Node {label} is an ARTICULATION POINT!")
        else:
            self.recorder.set_state(u, NodeState.VISITED)
            self.recorder.emit(f"Completed {label}")


def run_articulation(nodes: Sequence[Node], edges: Sequence[Edge]) -> List[Step]:
    """
    Generate the articulation point detection step sequence.

    Every connected component is analyzed, roots taken in node order. The last
    step shows every node in its terminal state and summarizes the result.

    Args:
        nodes: Graph nodes
        edges: Graph edges, treated as undirected

    Returns:
        Fully materialized list of Steps, empty if there are no nodes
    """
    if not nodes:
        return []

    search = _LowLinkSearch(nodes, build_adjacency(nodes, edges))
    recorder = search.recorder

    recorder.emit("Starting articulation points detection...")

    for node in nodes:
        if node.id not in search.visited:
            search.run_component(node.id)

    for node in nodes:
        terminal = NodeState.ARTICULATION if node.id in search.articulation_points else NodeState.VISITED
        recorder.set_state(node.id, terminal)

    if search.articulation_points:
        labels = ", ".join(recorder.label(node_id) for node_id in search.articulation_points)
        message = f"Found {len(search.articulation_points)} articulation point(s): {labels}"
    else:
        message = "No articulation points found in this graph"
    recorder.emit(message)

    logger.debug(f"Articulation detection produced {len(recorder.steps)} steps, {len(search.articulation_points)} points")
    return recorder.steps
