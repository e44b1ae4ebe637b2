# Step generators for graph traversal and analysis

from .bfs import run_bfs
from .dfs import run_dfs
from .articulation import run_articulation
from .recorder import StepRecorder

__all__ = [
    "run_bfs",
    "run_dfs",
    "run_articulation",
    "StepRecorder",
]
