from __future__ import annotations

from collections.abc import Iterator
from typing import Any

"""ScenarioContext: key-value hand-off between steps of one scenario.

Upload steps store the generated code/decode and the path of the patched
workbook here so that later assertion steps can read them back. Each key may
be written once per scenario; a fresh context is created for every scenario.
"""

__all__ = [
    "ScenarioContext",
    "ContextKeyError",
    "UPLOADED_CODE",
    "UPLOADED_DECODE",
    "UPLOADED_EXCEL_PATH",
]

UPLOADED_CODE = "uploadedCode"
UPLOADED_DECODE = "uploadedDecode"
UPLOADED_EXCEL_PATH = "uploadedExcelPath"


class ContextKeyError(KeyError):
    """Raised on a second write to a key, or on reading a key never written."""

    def __str__(self) -> str:  # KeyError の repr 表示を避ける
        return str(self.args[0]) if self.args else ""


class ScenarioContext:
    """Write-once mapping scoped to a single scenario."""

    def __init__(self, name: str = "") -> None:
        self.name = name
        self._values: dict[str, Any] = {}

    def set(self, key: str, value: Any) -> None:
        if key in self._values:
            raise ContextKeyError(f"context key already set in scenario '{self.name}': {key}")
        self._values[key] = value

    def get(self, key: str, default: Any = None) -> Any:
        return self._values.get(key, default)

    def require(self, key: str) -> Any:
        try:
            return self._values[key]
        except KeyError:
            raise ContextKeyError(f"context key not set in scenario '{self.name}': {key}") from None

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def as_dict(self) -> dict[str, Any]:
        return dict(self._values)
