"""Key mapping, UI themes, batched UI rendering and canvas windows for a 2D engine."""

__version__ = "0.1.0"
__all__ = ["keys", "theme", "ui", "window"]