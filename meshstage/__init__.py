"""Interactive OpenGL viewer for .obj meshes with a terminal-driven edit mode."""

__version__ = "0.1.0"

__all__ = ["__version__"]