import pytest

from graph_stepper.adjacency import build_adjacency, incident_edges
from graph_stepper.models import Edge


@pytest.mark.unit
class TestBuildAdjacency:
    """Unit tests for undirected adjacency construction."""

    def test_path_is_symmetric(self, path_graph):
        adjacency = build_adjacency(path_graph.nodes, path_graph.edges)

        assert adjacency == {
            "A": ["B"],
            "B": ["A", "C"],
            "C": ["B", "D"],
            "D": ["C"],
        }

    def test_isolated_node_has_empty_entry(self, graph_factory):
        graph = graph_factory("ABX", [("A", "B")])

        adjacency = build_adjacency(graph.nodes, graph.edges)

        assert adjacency["X"] == []

    def test_neighbor_order_follows_edge_order(self, graph_factory):
        graph = graph_factory("ABC", [("A", "C"), ("B", "A")])

        adjacency = build_adjacency(graph.nodes, graph.edges)

        assert adjacency["A"] == ["C", "B"]

    def test_dangling_endpoint_gets_an_entry(self, graph_factory):
        graph = graph_factory("A", [])
        edges = [Edge(id="e-AZ", source="A", target="Z")]

        adjacency = build_adjacency(graph.nodes, edges)

        assert adjacency["A"] == ["Z"]
        assert adjacency["Z"] == ["A"]

    def test_self_loop_and_duplicates_are_kept(self, graph_factory):
        graph = graph_factory("AB", [("A", "A"), ("A", "B"), ("B", "A")])

        adjacency = build_adjacency(graph.nodes, graph.edges)

        assert adjacency["A"] == ["A", "A", "B", "B"]
        assert adjacency["B"] == ["A", "A"]

    def test_empty_graph(self, empty_graph):
        assert build_adjacency(empty_graph.nodes, empty_graph.edges) == {}

    def test_does_not_mutate_input(self, path_graph):
        before = path_graph.model_dump()
        build_adjacency(path_graph.nodes, path_graph.edges)
        assert path_graph.model_dump() == before


@pytest.mark.unit
class TestIncidentEdges:

    def test_either_direction_counts(self, path_graph):
        assert incident_edges(path_graph.edges, "B") == {"e-AB": True, "e-BC": True}

    def test_no_edges(self, graph_factory):
        graph = graph_factory("AX", [])
        assert incident_edges(graph.edges, "X") == {}
