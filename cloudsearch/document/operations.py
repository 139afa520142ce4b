from __future__ import annotations

from typing import Any

from cloudsearch.core import HTTPMethod, Operation, RequestType

from ._helper import Helper

BATCH_PATH = "/documents/batch"


def add(documents: Any) -> Operation:
    """Create an operation adding documents to the index.

    Documents may be given as:

        add(Band(id=3, name="Grimes"))
        add({"id": 3, "name": "Grimes"})
        add({3: {"name": "Grimes"}})
        add((3, {"name": "Grimes"}))
        add([Band(id=3, name="Grimes"), {"id": 4, "name": "Lorde"}])

    Records are pydantic models, dataclasses or objects implementing
    HasDocumentId. Ids are converted to strings. Empty values ("",
    [] and None) are removed. Dates and datetimes are converted to
    UTC ISO-8601 strings. Batch size limits (5 MB per batch, 1 MB per
    document) are not checked.

    Args:
        documents:
            Document or list of documents.

    Returns:
        Document batch operation.

    Raises:
        BadRequestError:
            A document has no id or no fields, or no documents
            are given.
    """
    batch = Helper.get_add_batch(documents)
    return _batch_operation([b.to_native() for b in batch])


def remove(documents: Any) -> Operation:
    """Create an operation removing documents from the index.

        remove(Band(id=3))
        remove({"id": 3})
        remove(3)
        remove([3, 4])

    Args:
        documents:
            Document, document id or list of either.

    Returns:
        Document batch operation.

    Raises:
        BadRequestError:
            A document has no id, or no documents are given.
    """
    batch = Helper.get_remove_batch(documents)
    return _batch_operation([b.to_native() for b in batch])


def _batch_operation(batch: list[dict[str, Any]]) -> Operation:
    return Operation(
        request_type=RequestType.DOCUMENT,
        http_method=HTTPMethod.POST,
        path=BATCH_PATH,
        data=batch,
    )
