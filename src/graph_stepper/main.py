import json
import logging
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from graph_stepper.config import config
from graph_stepper.exceptions import GraphStepperException
from graph_stepper.logging_config import setup_logging
from graph_stepper.models import AlgorithmType, Graph, NodeState
from graph_stepper.runner import run_algorithm, resolve_start_node


app = typer.Typer()

STATE_STYLES = {
    NodeState.DEFAULT: "dim",
    NodeState.VISITED: "cyan",
    NodeState.CURRENT: "green",
    NodeState.ARTICULATION: "red",
}


@app.command()
def main(
    graph_file: Path = typer.Argument(
        ...,
        help="JSON file with 'nodes' and 'edges' lists.",
    ),
    algorithm: AlgorithmType = typer.Option(
        AlgorithmType.BFS,
        "--algorithm",
        "-a",
        help="Algorithm to narrate.",
    ),
    start: Optional[str] = typer.Option(
        None,
        "--start",
        "-s",
        help="Start node id for BFS/DFS (defaults to the first node).",
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print the step sequence as JSON instead of narration.",
    ),
    log_level: str = typer.Option(
        config.log_level,
        "--log-level",
        "-l",
        help="Log level (DEBUG, INFO, WARNING, ERROR).",
    ),
):
    """
    Run a graph algorithm on a saved graph and print its steps.
    """
    setup_logging(level=log_level)
    logger = logging.getLogger(__name__)

    try:
        graph = Graph.model_validate_json(graph_file.read_text(encoding="utf-8"))
    except OSError as e:
        logger.error(f"Could not read graph file {graph_file}: {e}")
        raise typer.Exit(code=1)
    except ValidationError as e:
        logger.error(f"Invalid graph file {graph_file}: {e}")
        raise typer.Exit(code=1)

    logger.info(f"Loaded graph with {len(graph.nodes)} nodes and {len(graph.edges)} edges")

    try:
        steps = run_algorithm(algorithm, graph, start)
    except GraphStepperException as e:
        logger.error(e.message)
        raise typer.Exit(code=1)

    if as_json:
        typer.echo(json.dumps([step.model_dump(mode="json") for step in steps], indent=2))
        return

    console = Console(soft_wrap=True)
    if algorithm != AlgorithmType.ARTICULATION:
        start_id = resolve_start_node(graph, start)
        if start_id is not None:
            console.print(f"Start node: {escape(graph.label_for(start_id))}")

    for index, step in enumerate(steps):
        line = f"[bold]{index:>3}[/bold] {escape(step.message)}"
        if step.current_node is not None:
            style = STATE_STYLES[step.node_states[step.current_node]]
            line += f" [{style}]({escape(graph.label_for(step.current_node))})[/{style}]"
        console.print(line)

    if not steps:
        console.print("Graph has no nodes; nothing to run.")
    else:
        final = steps[-1]
        summary = ", ".join(
            f"{state.value}={len(final.nodes_in_state(state))}" for state in NodeState
        )
        console.print(f"{len(steps)} steps. Final states: {summary}")


if __name__ == "__main__":
    app()
