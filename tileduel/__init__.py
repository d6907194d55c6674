"""Two-player sliding tile puzzle duel: board model, layout, pygame view and controller."""

__version__ = "1.0.0"
__all__ = ["__version__"]