from __future__ import annotations

import pytest

from storefront_e2e.models.upload_type import UnknownOperationError, UploadType


@pytest.mark.parametrize(
    "operation,expected",
    [
        ("add", UploadType.ADD),
        ("Add", UploadType.ADD),
        ("UPDATE", UploadType.UPDATE),
        ("delete", UploadType.DELETE),
        ("New Category", UploadType.NEW_CATEGORY),
        (" new category ", UploadType.NEW_CATEGORY),
    ],
)
def test_from_operation(operation, expected):
    assert UploadType.from_operation(operation) is expected


@pytest.mark.parametrize("operation", ["", "remove", "newcategory", "new  category"])
def test_from_operation_unknown(operation):
    with pytest.raises(UnknownOperationError) as e:
        UploadType.from_operation(operation)
    assert str(e.value) == f"Unknown operation type: {operation}"


def test_string_form_matches_function_column():
    assert [str(t) for t in UploadType] == ["Add", "Update", "Delete", "NewCategory"]


def test_unknown_operation_is_value_error():
    assert issubclass(UnknownOperationError, ValueError)
