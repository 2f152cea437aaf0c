from __future__ import annotations

from enum import Enum

"""UploadType enum for the Code/Decode bulk upload workbook.

The FUNCTION column of an upload workbook tells the application under test what
to do with each row. The step layer receives the operation as free text from
the feature file ("add", "new category", ...) and converts it here.
"""

__all__ = [
    "UploadType",
    "UnknownOperationError",
]


class UnknownOperationError(ValueError):
    """Raised when a feature file names an operation that has no UploadType."""


class UploadType(Enum):
    """Value written to the FUNCTION column of the patched row.

    - ADD: create a new code/decode pair
    - UPDATE: update an existing pair
    - DELETE: delete an existing pair
    - NEW_CATEGORY: create the pair under a new category
    """
    ADD = "Add"
    UPDATE = "Update"
    DELETE = "Delete"
    NEW_CATEGORY = "NewCategory"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_operation(cls, operation: str) -> UploadType:
        """Map a feature-file operation name to an UploadType (case-insensitive)."""
        key = operation.strip().lower()
        for member, name in _OPERATION_NAMES.items():
            if name == key:
                return member
        raise UnknownOperationError(f"Unknown operation type: {operation}")


_OPERATION_NAMES: dict[UploadType, str] = {
    UploadType.ADD: "add",
    UploadType.UPDATE: "update",
    UploadType.DELETE: "delete",
    UploadType.NEW_CATEGORY: "new category",
}
