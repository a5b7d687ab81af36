# glassblock/utils/errors.py


class DesignError(Exception):
    """Base class for every error raised by the design model."""


class ValidationError(DesignError, ValueError):
    """A value failed a field constraint (type, range or format)."""


class SlotIndexError(DesignError, IndexError):
    """A color slot or window index is outside the current range."""

    def __init__(self, kind: str, index, size: int):
        self.kind = kind
        self.index = index
        self.size = size
        bound = f"valid: 0-{size - 1}" if size > 0 else "no slots"
        super().__init__(f"{kind} index {index} is out of range ({bound})")


class ParseError(DesignError, ValueError):
    """Serialized design text could not be parsed."""
