class MonoditherError(Exception):
    """Base class for errors raised by the processing core."""


class InvalidColorSpec(MonoditherError, ValueError):
    """A custom color is not a 6-digit hex RGB string."""

    def __init__(self, value: object) -> None:
        super().__init__(f"Invalid color {value!r}: expected 6 hex digits like '#AABBCC'")
        self.value = value


class BufferSizeError(MonoditherError, ValueError):
    """Pixel buffer length does not match width * height * 4."""
