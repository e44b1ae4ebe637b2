from typing import Dict, List, Optional, Sequence

from ..models import Node, NodeState, Step


class StepRecorder:
    """
    Per-run scratch pad that turns mutable node states into frozen Steps.

    One recorder belongs to exactly one stepper invocation. Every emitted Step
    receives its own copies of the state maps, so later mutations never leak
    into steps already recorded.
    """

    def __init__(self, nodes: Sequence[Node]):
        self.labels: Dict[str, str] = {node.id: node.label for node in nodes}
        self.node_states: Dict[str, NodeState] = {node.id: NodeState.DEFAULT for node in nodes}
        self.steps: List[Step] = []

    def is_node(self, node_id: str) -> bool:
        return node_id in self.node_states

    def label(self, node_id: str) -> str:
        return self.labels.get(node_id, node_id)

    def set_state(self, node_id: str, state: NodeState) -> None:
        self.node_states[node_id] = state

    def emit(
        self,
        message: str,
        edge_states: Optional[Dict[str, bool]] = None,
        current_node: Optional[str] = None,
    ) -> Step:
        step = Step(
            node_states=dict(self.node_states),
            edge_states=dict(edge_states or {}),
            current_node=current_node,
            message=message,
        )
        self.steps.append(step)
        return step
