"""Line writer for building indented output."""

from typing import List

from .types import Depth


class LineWriter:
    """Collects output lines, prefixing each with its depth's indentation."""

    def __init__(self, indent_size: int = 2) -> None:
        self._lines: List[str] = []
        self._indentation_string = " " * indent_size

    def push(self, depth: Depth, content: str) -> None:
        """Append a line at the given depth."""
        self._lines.append(self._indentation_string * depth + content)

    def to_string(self) -> str:
        return "\n".join(self._lines)
