"""
Custom exceptions for graph authoring, algorithm dispatch and playback.

The step-generation engine itself raises none of these.
"""

class GraphStepperException(Exception):
    """Base exception for the application."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)

class NodeNotFoundError(GraphStepperException):
    """Raised when a node id does not exist in the graph being edited."""
    pass

class EdgeNotFoundError(GraphStepperException):
    """Raised when an edge id does not exist in the graph being edited."""
    pass

class EdgeRejectedError(GraphStepperException):
    """Raised when an edge violates the authoring policy."""
    pass

class SelfLoopError(EdgeRejectedError):
    """Raised when an edge would connect a node to itself."""
    pass

class DuplicateEdgeError(EdgeRejectedError):
    """Raised when the two nodes are already connected in either direction."""
    pass

class AlgorithmNotSelectedError(GraphStepperException):
    """Raised when a run is requested without choosing an algorithm."""
    pass

class PlaybackIntervalError(GraphStepperException):
    """Raised when a playback interval falls outside the configured bounds."""
    pass
