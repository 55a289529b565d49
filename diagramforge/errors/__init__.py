from .placeholder import DiagramForgeError, PlaceholderError

__all__ = ["DiagramForgeError", "PlaceholderError"]
