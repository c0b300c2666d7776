"""Two-player artillery game on deformable terrain, drawn with pygame."""

__version__ = "0.1.0"