"""
Graph Stepper - Core Library

Turns a graph and a traversal request (BFS, DFS or articulation point
detection) into a fully materialized, replayable list of narrated Steps.
"""

from .adjacency import build_adjacency
from .algorithms import run_bfs, run_dfs, run_articulation
from .models import Node, Edge, Graph, NodeState, AlgorithmType, Step

__all__ = [
    'build_adjacency',
    'run_bfs',
    'run_dfs',
    'run_articulation',
    'Node',
    'Edge',
    'Graph',
    'NodeState',
    'AlgorithmType',
    'Step',
]
