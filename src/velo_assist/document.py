"""In-memory text document addressed by zero-based line/character positions."""

from pathlib import Path

from velo_assist.models import Position, Range


class TextDocument:
    """A document's full text plus the selection helpers code actions need.

    Lines are split on line feeds only, so a trailing carriage return stays
    part of its line.
    """

    def __init__(self, text: str, path: Path | None = None):
        self._text = text
        self._lines = text.split("\n")
        self.path = path

    @classmethod
    def from_path(cls, path: Path) -> "TextDocument":
        """Load a document from a UTF-8 file.

        Raises:
            FileNotFoundError: If the file does not exist
        """
        return cls(path.read_text(encoding="utf-8"), path)

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def line_at(self, line: int) -> str:
        """Return a line's text, or "" past the end of the document."""
        if 0 <= line < len(self._lines):
            return self._lines[line]
        return ""

    def clamp(self, position: Position) -> Position:
        """Pull position back inside the document's lines and characters."""
        line = min(max(0, position.line), len(self._lines) - 1)
        character = min(max(0, position.character), len(self._lines[line]))
        return Position(line=line, character=character)

    def get_text(self, selection: Range | None = None) -> str:
        """Return the whole text, or the text inside selection.

        Selection positions outside the document are clamped to it. A
        selection whose start falls after its end is empty.
        """
        if selection is None:
            return self._text

        start = self.offset_at(selection.start)
        end = self.offset_at(selection.end)
        if start >= end:
            return ""
        return self._text[start:end]

    def offset_at(self, position: Position) -> int:
        position = self.clamp(position)
        offset = sum(len(line) + 1 for line in self._lines[:position.line])
        return offset + position.character

    def position_at(self, offset: int) -> Position:
        before = self._text[:offset].split("\n")
        return Position(line=len(before) - 1, character=len(before[-1]))

    def replace(self, selection: Range, new_text: str) -> str:
        """Return the document text with selection replaced by new_text.

        Uses the same clamped span as get_text.
        """
        start = self.offset_at(selection.start)
        end = max(start, self.offset_at(selection.end))
        return self._text[:start] + new_text + self._text[end:]
