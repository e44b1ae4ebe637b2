from typing import List, Dict, Optional
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field, field_validator

# --- Enums ---

class NodeState(str, Enum):
    """Visual state of a node at one instant of a run."""
    DEFAULT = "default"
    VISITED = "visited"
    CURRENT = "current"
    ARTICULATION = "articulation"

class AlgorithmType(str, Enum):
    """Algorithms the engine can narrate."""
    NONE = "none"
    BFS = "bfs"
    DFS = "dfs"
    ARTICULATION = "articulation"

# --- Graph Models ---

class Node(BaseModel):
    """A vertex of the authored graph."""
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, description="Unique node identifier")
    x: float = Field(0.0, description="Horizontal canvas position (rendering only)")
    y: float = Field(0.0, description="Vertical canvas position (rendering only)")
    label: str = Field(..., description="Display label used in narration")

class Edge(BaseModel):
    """An undirected connection between two node ids."""
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, description="Unique edge identifier")
    source: str = Field(..., description="Id of one endpoint")
    target: str = Field(..., description="Id of the other endpoint")

    def touches(self, node_id: str) -> bool:
        return self.source == node_id or self.target == node_id

    def connects(self, node_a: str, node_b: str) -> bool:
        """True if this edge links node_a and node_b in either direction."""
        return {self.source, self.target} == {node_a, node_b}

class Graph(BaseModel):
    """An immutable snapshot of nodes and edges."""
    model_config = ConfigDict(frozen=True)

    nodes: List[Node] = Field(default_factory=list, description="Nodes in authoring order")
    edges: List[Edge] = Field(default_factory=list, description="Edges in authoring order")

    def node_ids(self) -> List[str]:
        return [node.id for node in self.nodes]

    def get_node(self, node_id: str) -> Optional[Node]:
        for node in self.nodes:
            if node.id == node_id:
                return node
        return None

    def label_for(self, node_id: str) -> str:
        """Label of the node, or the raw id when no such node exists."""
        node = self.get_node(node_id)
        return node.label if node is not None else node_id

# --- Step Models ---

class FrozenDict(dict):
    """A dict that refuses changes once built. Serializes like any other dict."""

    def _read_only(self, *args, **kwargs):
        raise TypeError(f"{type(self).__name__} is read-only")

    __setitem__ = __delitem__ = __ior__ = _read_only
    clear = pop = popitem = setdefault = update = _read_only

    def __reduce__(self):
        return type(self), (dict(self),)

class Step(BaseModel):
    """
    One replayable frame: full node states, edge highlights and narration.

    Both maps are read-only once the step is built.
    """
    model_config = ConfigDict(frozen=True)

    node_states: Dict[str, NodeState] = Field(..., description="State of every node at this instant")
    edge_states: Dict[str, bool] = Field(default_factory=dict, validate_default=True, description="Highlighted edges; absent ids are not highlighted")
    current_node: Optional[str] = Field(None, description="Node being processed, if any")
    message: str = Field(..., description="Human-readable narration of what just happened")

    @field_validator("node_states", "edge_states")
    @classmethod
    def _freeze_mapping(cls, value: dict) -> FrozenDict:
        return FrozenDict(value)

    @property
    def highlighted_edges(self) -> List[str]:
        return [edge_id for edge_id, active in self.edge_states.items() if active]

    def nodes_in_state(self, state: NodeState) -> List[str]:
        return [node_id for node_id, s in self.node_states.items() if s == state]
