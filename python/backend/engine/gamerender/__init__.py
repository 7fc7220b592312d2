from backend.engine.gamerender.geometry import GeometryBuilder, Layout, VertexBuffer

__all__ = ["GeometryBuilder", "Layout", "VertexBuffer"]
