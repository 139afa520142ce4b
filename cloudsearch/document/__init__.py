from ..core.exceptions import BadRequestError
from ._models import BatchAdd, BatchDelete, BatchOperationType, HasDocumentId
from .operations import add, remove

__all__ = [
    "BadRequestError",
    "BatchAdd",
    "BatchDelete",
    "BatchOperationType",
    "HasDocumentId",
    "add",
    "remove",
]
