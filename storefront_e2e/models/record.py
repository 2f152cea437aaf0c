from __future__ import annotations

from dataclasses import dataclass, field, replace

from ..excel.errors import MissingColumnError

"""HeaderMap and Record models for the upload workbook.

A Record keeps its cells positionally (same order as the header row) and
resolves header names through the shared HeaderMap. Header lookup is
case-insensitive and ignores surrounding whitespace.
"""

__all__ = [
    "HeaderMap",
    "Record",
    "normalize_header",
]


def normalize_header(name: str) -> str:
    """Normalize a header cell text for lookup (trim + uppercase)."""
    return name.strip().upper()


@dataclass(frozen=True)
class HeaderMap:
    """Header row of a worksheet.

    ``names`` keeps the header cell texts verbatim in sheet order.
    ``index`` maps normalized name -> 1-based column number. When a name occurs
    twice the first column wins. Blank header cells are not indexed.
    """
    names: tuple[str, ...]
    index: dict[str, int] = field(default_factory=dict)

    @classmethod
    def from_names(cls, names: list[str]) -> HeaderMap:
        index: dict[str, int] = {}
        for col, name in enumerate(names, start=1):
            key = normalize_header(name)
            if key and key not in index:
                index[key] = col
        return cls(names=tuple(names), index=index)

    def __len__(self) -> int:
        return len(self.names)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and normalize_header(name) in self.index

    def column(self, name: str) -> int:
        """Return the 1-based column of ``name`` or raise MissingColumnError."""
        try:
            return self.index[normalize_header(name)]
        except KeyError:
            raise MissingColumnError(normalize_header(name)) from None


@dataclass(frozen=True)
class Record:
    """One non-header worksheet row, exposed as header name -> cell text.

    ``row_number`` is the original 1-based worksheet row (2 = first data row).
    Missing trailing cells read as "".
    """
    row_number: int
    header: HeaderMap
    cells: tuple[str, ...]

    def __getitem__(self, name: str) -> str:
        col = self.header.column(name)
        if col > len(self.cells):
            return ""
        return self.cells[col - 1]

    def get(self, name: str, default: str = "") -> str:
        if name not in self.header:
            return default
        return self[name]

    @property
    def is_blank(self) -> bool:
        return all(not c.strip() for c in self.cells)

    def values(self) -> list[str]:
        """Cell texts in header order, padded with "" to the header width."""
        width = max(len(self.header), len(self.cells))
        return list(self.cells) + [""] * (width - len(self.cells))

    def as_dict(self) -> dict[str, str]:
        """Header-keyed view (verbatim header text). Blank headers are omitted."""
        vals = self.values()
        out: dict[str, str] = {}
        for col, name in enumerate(self.header.names, start=1):
            if name.strip() and name not in out:
                out[name] = vals[col - 1]
        return out

    def with_fields(self, updates: dict[str, str]) -> Record:
        """Return a copy with the named fields overwritten.

        Raises MissingColumnError if a name is not in the header.
        """
        vals = self.values()
        for name, value in updates.items():
            col = self.header.column(name)
            vals[col - 1] = value
        return replace(self, cells=tuple(vals))
