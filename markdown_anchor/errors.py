"""Errors raised while computing anchors."""


class AnchorError(Exception):
    """Base class for every error raised by markdown_anchor."""


class UnsupportedModeError(AnchorError, ValueError):
    """Raised when the platform key is not one of the supported platforms."""

    def __init__(self, mode: object) -> None:
        self.mode = mode
        super().__init__(f"Unknown mode: {mode}")


class MissingParameterError(AnchorError, ValueError):
    """Raised when a platform needs a parameter the caller did not supply."""

    def __init__(self, mode: object, parameter: str) -> None:
        self.mode = mode
        self.parameter = parameter
        super().__init__(
            f"Need {parameter.replace('_', ' ')} to generate proper anchor for {mode}"
        )


class InvalidRepetitionError(AnchorError, ValueError):
    """Raised when a repetition cannot be read as a non-negative count."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Repetition must be a non-negative integer, got {value!r}")
