"""Exceptions raised by the game engine."""


class EngineError(RuntimeError):
    """Raised when the multimedia backend fails to set something up or load a resource."""

    def __init__(self, message: str) -> None:
        super().__init__(str(message))