import logging
from typing import List, Optional

from .exceptions import (
    NodeNotFoundError,
    EdgeNotFoundError,
    SelfLoopError,
    DuplicateEdgeError,
)
from .models import Node, Edge, Graph


class GraphEditor:
    """
    Authors a graph with the editing policies of the visualizer.

    Node ids come from a monotonic counter ("node-0", "node-1", ...) and labels
    cycle through A-Z based on the current node count. Edges are undirected:
    an edge is rejected if it would connect a node to itself or duplicate an
    existing connection between the same two nodes in either direction.
    """

    def __init__(self):
        self._nodes: List[Node] = []
        self._edges: List[Edge] = []
        self._node_counter = 0
        self.logger = logging.getLogger(__name__)

    @property
    def graph(self) -> Graph:
        """Immutable snapshot of the current graph."""
        return Graph(nodes=list(self._nodes), edges=list(self._edges))

    def _find_node(self, node_id: str) -> Optional[Node]:
        for node in self._nodes:
            if node.id == node_id:
                return node
        return None

    def _require_node(self, node_id: str) -> Node:
        node = self._find_node(node_id)
        if node is None:
            raise NodeNotFoundError(f"Node '{node_id}' not found.")
        return node

    def add_node(self, x: float, y: float) -> Node:
        node = Node(
            id=f"node-{self._node_counter}",
            x=x,
            y=y,
            label=chr(65 + (len(self._nodes) % 26)),
        )
        self._node_counter += 1
        self._nodes.append(node)
        self.logger.debug(f"Added node {node.label} ({node.id})")
        return node

    def move_node(self, node_id: str, x: float, y: float) -> Node:
        node = self._require_node(node_id)
        moved = node.model_copy(update={"x": x, "y": y})
        self._nodes = [moved if n.id == node_id else n for n in self._nodes]
        return moved

    def delete_node(self, node_id: str) -> Node:
        """Remove a node together with every edge touching it."""
        node = self._require_node(node_id)
        self._nodes = [n for n in self._nodes if n.id != node_id]
        removed_edges = [e for e in self._edges if e.touches(node_id)]
        self._edges = [e for e in self._edges if not e.touches(node_id)]
        self.logger.debug(f"Deleted node {node.label} and {len(removed_edges)} incident edges")
        return node

    def add_edge(self, source: str, target: str) -> Edge:
        """
        Connect two existing nodes.

        Raises:
            SelfLoopError: If source equals target
            NodeNotFoundError: If either endpoint does not exist
            DuplicateEdgeError: If the nodes are already connected
        """
        if source == target:
            raise SelfLoopError(f"Cannot connect node '{source}' to itself.")
        source_node = self._require_node(source)
        target_node = self._require_node(target)
        existing = next((edge for edge in self._edges if edge.connects(source, target)), None)
        if existing is not None:
            # Name the pair in the direction it was first drawn
            first, second = self._require_node(existing.source), self._require_node(existing.target)
            raise DuplicateEdgeError(
                f"Nodes {first.label} and {second.label} are already connected."
            )

        edge = Edge(id=f"edge-{source}-{target}", source=source, target=target)
        self._edges.append(edge)
        self.logger.debug(f"Created edge {source_node.label} -> {target_node.label}")
        return edge

    def remove_edge(self, edge_id: str) -> Edge:
        for edge in self._edges:
            if edge.id == edge_id:
                self._edges = [e for e in self._edges if e.id != edge_id]
                return edge
        raise EdgeNotFoundError(f"Edge '{edge_id}' not found.")

    def clear(self) -> None:
        """Remove every node and edge and restart id numbering."""
        self._nodes = []
        self._edges = []
        self._node_counter = 0
        self.logger.debug("Graph cleared")
