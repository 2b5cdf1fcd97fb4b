"""Interactive grid editor that visualises breadth-first search pathfinding."""

__version__ = "0.1.0"
__all__ = ["__version__"]