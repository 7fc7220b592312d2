from backend.engine.gameinput.edge import (
    DIRECTION_TO_KEY,
    InputEdgeDetector,
    direction_for,
)

__all__ = ["DIRECTION_TO_KEY", "InputEdgeDetector", "direction_for"]
