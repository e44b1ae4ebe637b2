"""
Pytest configuration and shared graph fixtures.
"""

import pytest
import logging
from typing import Callable, Iterable, List, Tuple

from graph_stepper.models import Node, Edge, Graph

# Configure logging for tests
logging.basicConfig(level=logging.INFO)

GraphFactory = Callable[[Iterable[str], Iterable[Tuple[str, str]]], Graph]


def make_graph(labels: Iterable[str], pairs: Iterable[Tuple[str, str]]) -> Graph:
    """Graph whose node ids equal their labels and whose edges are named e-<source><target>."""
    nodes: List[Node] = [Node(id=label, x=float(i * 50), y=0.0, label=label) for i, label in enumerate(labels)]
    edges: List[Edge] = [Edge(id=f"e-{s}{t}", source=s, target=t) for s, t in pairs]
    return Graph(nodes=nodes, edges=edges)


@pytest.fixture
def graph_factory() -> GraphFactory:
    """Build small labelled graphs inline."""
    return make_graph

@pytest.fixture
def path_graph() -> Graph:
    """A - B - C - D"""
    return make_graph("ABCD", [("A", "B"), ("B", "C"), ("C", "D")])

@pytest.fixture
def ring_graph() -> Graph:
    """Five nodes in a single cycle."""
    return make_graph("ABCDE", [("A", "B"), ("B", "C"), ("C", "D"), ("D", "E"), ("E", "A")])

@pytest.fixture
def bridge_graph() -> Graph:
    """Triangles ABC and DEF joined by the bridge C - D."""
    return make_graph(
        "ABCDEF",
        [("A", "B"), ("B", "C"), ("C", "A"), ("C", "D"), ("D", "E"), ("E", "F"), ("F", "D")],
    )

@pytest.fixture
def tree_graph() -> Graph:
    """A has children B and C; B has child D."""
    return make_graph("ABCD", [("A", "B"), ("A", "C"), ("B", "D")])

@pytest.fixture
def empty_graph() -> Graph:
    return Graph()
