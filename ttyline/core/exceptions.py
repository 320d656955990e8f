"""
Exceptions raised by the line settings layer.
"""


class LineSettingsError(IOError):
    """Raised when terminal line settings cannot be read or applied."""
    pass


class UnrecognizedSttyOutputError(LineSettingsError):
    """Raised when ``stty -g`` returns something that is not a settings dump."""

    def __init__(self, output: str):
        super().__init__(f"Unrecognized stty code: {output}")
        self.output = output


class PropertyNotFoundError(LookupError):
    """Raised by the parser when no clause names the requested property."""
    pass
