class DiagramForgeError(Exception):
    """Base class for errors raised by diagramforge."""


class PlaceholderError(DiagramForgeError, ValueError):
    """A replacement callback produced something other than a single line."""

    def __init__(self, block_id: str, placeholder: str):
        self.block_id = block_id
        self.placeholder = placeholder
        super().__init__(
            f"Placeholder for diagram block '{block_id}' must be a single line, "
            f"got {placeholder!r}"
        )
