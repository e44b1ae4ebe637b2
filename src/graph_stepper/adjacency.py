"""
Undirected adjacency construction shared by every stepper.
"""

from typing import Dict, List, Sequence

from .models import Node, Edge

AdjacencyMap = Dict[str, List[str]]


def build_adjacency(nodes: Sequence[Node], edges: Sequence[Edge]) -> AdjacencyMap:
    """
    Build an undirected adjacency map from node and edge lists.

    Every node gets an entry, isolated nodes included. Neighbor order follows
    edge input order, which decides traversal tie-breaks downstream. Edges
    whose endpoints are not among the nodes still contribute entries keyed by
    the unknown id.

    Args:
        nodes: Nodes of the graph
        edges: Edges of the graph, treated as undirected

    Returns:
        Mapping from node id to its ordered neighbor ids
    """
    adjacency: AdjacencyMap = {node.id: [] for node in nodes}
    for edge in edges:
        adjacency.setdefault(edge.source, []).append(edge.target)
        adjacency.setdefault(edge.target, []).append(edge.source)
    return adjacency


def incident_edges(edges: Sequence[Edge], node_id: str) -> Dict[str, bool]:
    """Highlight map of every edge touching node_id, in edge order."""
    return {edge.id: True for edge in edges if edge.touches(node_id)}
