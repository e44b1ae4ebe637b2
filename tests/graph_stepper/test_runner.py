import pytest

from graph_stepper import run_bfs, run_dfs, run_articulation
from graph_stepper.exceptions import AlgorithmNotSelectedError
from graph_stepper.models import AlgorithmType
from graph_stepper.runner import run_algorithm, resolve_start_node


@pytest.mark.unit
class TestResolveStartNode:

    def test_selected_node_wins(self, path_graph):
        assert resolve_start_node(path_graph, "C") == "C"

    def test_falls_back_to_first_node(self, path_graph):
        assert resolve_start_node(path_graph) == "A"

    def test_empty_graph(self, empty_graph):
        assert resolve_start_node(empty_graph) is None


@pytest.mark.unit
class TestRunAlgorithm:

    def test_bfs_defaults_to_first_node(self, path_graph):
        steps = run_algorithm(AlgorithmType.BFS, path_graph)

        assert steps == run_bfs(path_graph.nodes, path_graph.edges, "A")

    def test_dfs_uses_selected_start(self, path_graph):
        steps = run_algorithm(AlgorithmType.DFS, path_graph, "C")

        assert steps == run_dfs(path_graph.nodes, path_graph.edges, "C")
        assert steps[0].message == "Starting DFS from node C"

    def test_articulation_ignores_start(self, bridge_graph):
        steps = run_algorithm(AlgorithmType.ARTICULATION, bridge_graph, "E")

        assert steps == run_articulation(bridge_graph.nodes, bridge_graph.edges)

    def test_accepts_algorithm_value_strings(self, path_graph):
        assert run_algorithm("dfs", path_graph) == run_algorithm(AlgorithmType.DFS, path_graph)

    @pytest.mark.parametrize("algorithm", [AlgorithmType.BFS, AlgorithmType.DFS, AlgorithmType.ARTICULATION])
    def test_empty_graph_returns_no_steps(self, empty_graph, algorithm):
        assert run_algorithm(algorithm, empty_graph) == []

    def test_none_requires_selection(self, path_graph):
        with pytest.raises(AlgorithmNotSelectedError):
            run_algorithm(AlgorithmType.NONE, path_graph)
