"""
Row Decoder

Turns the physical lines of a delimited file into header-keyed rows.
"""
from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from src.trailblazers.seeding.tokenizer import tokenize

BOM = "\ufeff"


@dataclass(frozen=True)
class HeaderedRow:
    """
    Name-to-value view of one data line.

    Attributes:
        line_number: 1-based physical line number in the source
        raw: Line text without its terminator
        values: Raw (untrimmed) field values keyed by header name
    """
    line_number: int
    raw: str
    values: Dict[str, str] = field(default_factory=dict)

    def get(self, column: str) -> Optional[str]:
        """Return the raw value for an exact header name, or None if absent."""
        return self.values.get(column)


def _strip_terminator(line: str) -> str:
    return line.rstrip("\r\n")


def _is_blank(line: str) -> bool:
    return not line.strip()


def align(headers: List[str], fields: List[str]) -> Dict[str, str]:
    """
    Pair header names with field values by position.

    Missing trailing values become "" and values beyond the header are dropped.
    """
    padded = fields + [""] * (len(headers) - len(fields))
    return dict(zip(headers, padded))


class RowDecoder:
    """
    Header-aware iterator over the data rows of a delimited file.

    The first non-blank line is read eagerly as the header; blank and
    whitespace-only lines are skipped everywhere and never produce a row.

    The decoder accepts any iterable of lines, not only files opened by the
    orchestrator (which reads with utf-8-sig and so never passes a BOM). A
    BOM left at the start of the header line, as with lines decoded as
    plain utf-8, is stripped before the header names are split.

    Usage:
        with path.open(encoding="utf-8") as fh:
            decoder = RowDecoder(fh)
            for row in decoder:
                ...
    """

    def __init__(self, lines: Iterable[str]):
        self._lines: Iterator[Tuple[int, str]] = enumerate(lines, start=1)
        self.headers: Optional[List[str]] = self._read_header()

    def _read_header(self) -> Optional[List[str]]:
        for _, line in self._lines:
            text = _strip_terminator(line)
            if _is_blank(text):
                continue
            if text.startswith(BOM):
                text = text[len(BOM):]
            return [name.strip() for name in tokenize(text)]
        return None

    def __iter__(self) -> Iterator[HeaderedRow]:
        if self.headers is None:
            return
        for line_number, line in self._lines:
            text = _strip_terminator(line)
            if _is_blank(text):
                continue
            yield HeaderedRow(
                line_number=line_number,
                raw=text,
                values=align(self.headers, tokenize(text)),
            )
