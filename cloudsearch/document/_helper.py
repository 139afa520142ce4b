from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from datetime import date, datetime, time, timezone
from typing import Any

from pydantic import BaseModel

from cloudsearch.core.exceptions import BadRequestError

from ._models import BatchAdd, BatchDelete, HasDocumentId

ID_FIELD = "id"


class Helper:
    @staticmethod
    def get_add_batch(documents: Any) -> list[BatchAdd]:
        pairs = Helper.get_add_pairs(documents)
        if not pairs:
            raise BadRequestError("Must provide documents to index.")
        return [Helper.get_add(id, fields) for id, fields in pairs]

    @staticmethod
    def get_remove_batch(documents: Any) -> list[BatchDelete]:
        ids = Helper.get_remove_ids(documents)
        if not ids:
            raise BadRequestError("Must provide documents to remove.")
        return [BatchDelete(id=Helper.get_id(id)) for id in ids]

    @staticmethod
    def get_add_pairs(documents: Any) -> list[tuple[Any, Any]]:
        if documents is None:
            return []
        if isinstance(documents, list):
            pairs = []
            for document in documents:
                pairs.extend(Helper.get_add_pairs(document))
            return pairs
        if isinstance(documents, tuple):
            if len(documents) != 2:
                raise BadRequestError(
                    f"Cannot add document {documents!r}; "
                    "expected an id and fields."
                )
            return [(documents[0], documents[1])]
        if isinstance(documents, HasDocumentId):
            return [
                (
                    documents.__document_id__(),
                    documents.__document_fields__(),
                )
            ]
        record = Helper.get_record_fields(documents)
        if record is not None:
            if ID_FIELD not in record:
                raise BadRequestError(
                    "Cannot add a document directly from "
                    f"{type(documents).__qualname__}; "
                    "it does not have an id field."
                )
            return [Helper.split_id(record)]
        if isinstance(documents, Mapping):
            if ID_FIELD in documents:
                return [Helper.split_id(documents)]
            if all(isinstance(v, Mapping) for v in documents.values()):
                return list(documents.items())
            raise BadRequestError(
                "Cannot add a document from a map "
                "that does not have an id field."
            )
        raise BadRequestError(
            f"Cannot add document {documents!r}; "
            "documents need an id and fields."
        )

    @staticmethod
    def get_remove_ids(documents: Any) -> list[Any]:
        if documents is None:
            return []
        if isinstance(documents, (list, tuple)):
            ids = []
            for document in documents:
                ids.extend(Helper.get_remove_ids(document))
            return ids
        if isinstance(documents, HasDocumentId):
            return [documents.__document_id__()]
        record = Helper.get_record_fields(documents)
        if record is not None:
            if ID_FIELD not in record:
                raise BadRequestError(
                    "Cannot remove a document of "
                    f"{type(documents).__qualname__}; "
                    "it does not have an id field."
                )
            return [record[ID_FIELD]]
        if isinstance(documents, Mapping):
            if ID_FIELD not in documents:
                raise BadRequestError(
                    "Cannot find an id field in the provided map "
                    "to remove this document."
                )
            return [documents[ID_FIELD]]
        return [documents]

    @staticmethod
    def get_record_fields(value: Any) -> dict[str, Any] | None:
        if isinstance(value, BaseModel):
            return value.model_dump()
        if dataclasses.is_dataclass(value) and not isinstance(value, type):
            return dataclasses.asdict(value)
        return None

    @staticmethod
    def split_id(document: Mapping[str, Any]) -> tuple[Any, dict[str, Any]]:
        fields = {k: v for k, v in document.items() if k != ID_FIELD}
        return document[ID_FIELD], fields

    @staticmethod
    def get_id(id: Any) -> str:
        if id is None or id == "":
            raise BadRequestError("Document id must not be empty.")
        return str(id)

    @staticmethod
    def get_add(id: Any, fields: Any) -> BatchAdd:
        id = Helper.get_id(id)
        if not isinstance(fields, Mapping):
            raise BadRequestError(
                f"Cannot add document {id} because "
                "it does not have a map for fields."
            )
        nfields: dict[str, Any] = dict()
        for key, value in fields.items():
            nvalue = Helper.normalize_field(key, value)
            if nvalue is not None:
                nfields[str(key)] = nvalue
        if not nfields:
            raise BadRequestError(
                f"At least one field must be specified for document {id}."
            )
        return BatchAdd(id=id, fields=nfields)

    @staticmethod
    def normalize_field(key: Any, value: Any) -> Any:
        if isinstance(value, datetime):
            if value.tzinfo is None:
                value = value.replace(tzinfo=timezone.utc)
            value = value.astimezone(timezone.utc).isoformat()
            return value.replace("+00:00", "Z")
        if isinstance(value, date):
            return f"{value.isoformat()}T00:00:00Z"
        if isinstance(value, time):
            raise BadRequestError(
                f"Cannot add a time as a document field for {key}."
            )
        if isinstance(value, (str, list, tuple)) and len(value) == 0:
            return None
        if isinstance(value, tuple):
            return list(value)
        return value
