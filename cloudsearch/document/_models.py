from __future__ import annotations

from enum import Enum
from typing import Any, Protocol, runtime_checkable

from cloudsearch.core import DataModel


class BatchOperationType(str, Enum):
    ADD = "add"
    DELETE = "delete"


class BatchAdd(DataModel):
    """Add (or replace) a document.

    Attributes:
        type: Batch operation type.
        id: Document id.
        fields: Field values: strings, numbers or lists of either.
    """

    type: BatchOperationType = BatchOperationType.ADD
    id: str
    fields: dict[str, Any]

    def to_native(self) -> dict[str, Any]:
        # field values stay as given for the codec
        return {"type": self.type.value, "id": self.id, "fields": self.fields}


class BatchDelete(DataModel):
    """Delete a document.

    Attributes:
        type: Batch operation type.
        id: Document id.
    """

    type: BatchOperationType = BatchOperationType.DELETE
    id: str

    def to_native(self) -> dict[str, Any]:
        return {"type": self.type.value, "id": self.id}


@runtime_checkable
class HasDocumentId(Protocol):
    """Object convertible into a search document."""

    def __document_id__(self) -> Any: ...

    def __document_fields__(self) -> dict[str, Any]: ...
