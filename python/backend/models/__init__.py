from backend.models.board import Board, Direction, GridInvariantError
from backend.models.geometry import DrawBatch, Frame, Rectangle, Texture, Vertex
from backend.models.keys import Key

__all__ = [
    "Board",
    "Direction",
    "DrawBatch",
    "Frame",
    "GridInvariantError",
    "Key",
    "Rectangle",
    "Texture",
    "Vertex",
]
