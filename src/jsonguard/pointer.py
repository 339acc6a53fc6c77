"""JSON Pointer path tracking."""

from __future__ import annotations

from collections.abc import Iterable


def escape_segment(segment: str | int) -> str:
    """Escape one path segment per RFC 6901."""
    return str(segment).replace("~", "~0").replace("/", "~1")


def unescape_segment(segment: str) -> str:
    """Reverse ``escape_segment``."""
    return segment.replace("~1", "/").replace("~0", "~")


class Pointer:
    """An immutable JSON Pointer.

    Segments are property names or array indices. ``join`` returns a new
    pointer so a parent's pointer is never changed by its children.

    Example:
        >>> str(Pointer().join("a").join(0).join("b/c"))
        '/a/0/b~1c'
    """

    __slots__ = ("_segments",)

    def __init__(self, segments: Iterable[str | int] = ()):
        self._segments: tuple[str | int, ...] = tuple(segments)

    @classmethod
    def parse(cls, pointer: str) -> Pointer:
        """Parse a rendered pointer such as ``/a/0/b``."""
        if not pointer:
            return cls()
        if not pointer.startswith("/"):
            raise ValueError(f"Invalid JSON pointer: '{pointer}'")
        return cls(unescape_segment(part) for part in pointer[1:].split("/"))

    @property
    def segments(self) -> tuple[str | int, ...]:
        return self._segments

    def join(self, segment: str | int) -> Pointer:
        return Pointer(self._segments + (segment,))

    def __str__(self) -> str:
        return "".join("/" + escape_segment(segment) for segment in self._segments)

    def __repr__(self) -> str:
        return f"Pointer({str(self)!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Pointer):
            return self._segments == other._segments
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._segments)

    def __len__(self) -> int:
        return len(self._segments)
