"""Widget set drawn with pygame, and a demo application built on a stack of screens."""

__version__ = "0.1.0"