"""
Error taxonomy.

We separate error types so callers can react correctly.
Example:
MissingAttractor aborts the whole conversion, there is no partial hierarchy.
IncompleteSystem is only raised when the caller opted into strict validation.
ColorParseError points at one authored color string.
"""


class ConverterError(Exception):
    """Base class for all converter exceptions."""


class MissingAttractor(ConverterError):
    """Raised when an orbiting body references an attractor that does not exist."""

    def __init__(self, attractor: str, body: str = "") -> None:
        self.attractor = attractor
        self.body = body
        if not attractor:
            super().__init__(f"body {body} has no referenceBody")
            return
        detail = f" (referenced by {body})" if body else ""
        super().__init__(f"Missing body {attractor}{detail}")


class IncompleteSystem(ConverterError):
    """Raised by the strict validation pass when resolved fields are still unknown."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = list(errors)
        super().__init__("system has unresolved fields: " + "; ".join(self.errors))


class ColorParseError(ConverterError, ValueError):
    """Raised when an authored color string cannot be parsed."""


class ConfigSourceError(ConverterError):
    """Raised when a system file does not have the expected shape."""
