"""
Algorithm dispatch for callers that hold a whole Graph and a selection.
"""

import logging
from typing import List, Optional

from .algorithms import run_bfs, run_dfs, run_articulation
from .exceptions import AlgorithmNotSelectedError
from .models import AlgorithmType, Graph, Step

logger = logging.getLogger(__name__)


def resolve_start_node(graph: Graph, selected_node_id: Optional[str] = None) -> Optional[str]:
    """Return the selected node, falling back to the first authored node."""
    if selected_node_id:
        return selected_node_id
    if graph.nodes:
        return graph.nodes[0].id
    return None


def run_algorithm(
    algorithm: AlgorithmType,
    graph: Graph,
    start_node_id: Optional[str] = None,
) -> List[Step]:
    """
    Run one algorithm on a graph snapshot and return its full step sequence.

    Args:
        algorithm: Which algorithm to run
        graph: Graph snapshot to analyze
        start_node_id: Start node for BFS/DFS; defaults to the first node

    Returns:
        List of Steps, empty when the graph has no nodes

    Raises:
        AlgorithmNotSelectedError: If algorithm is AlgorithmType.NONE
    """
    algorithm = AlgorithmType(algorithm)
    if algorithm == AlgorithmType.NONE:
        raise AlgorithmNotSelectedError("Select an algorithm before running.")

    if not graph.nodes:
        logger.info("Graph has no nodes; nothing to run")
        return []

    if algorithm == AlgorithmType.ARTICULATION:
        steps = run_articulation(graph.nodes, graph.edges)
    else:
        start = resolve_start_node(graph, start_node_id)
        stepper = run_bfs if algorithm == AlgorithmType.BFS else run_dfs
        steps = stepper(graph.nodes, graph.edges, start)

    logger.debug(
        f"{algorithm.value} on {len(graph.nodes)} nodes / {len(graph.edges)} edges produced {len(steps)} steps"
    )
    return steps
