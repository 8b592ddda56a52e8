"""Operation result types and status enums."""

from serde_gettext.operations.result import OperationResult
from serde_gettext.operations.status import OperationStatus

__all__ = [
    "OperationResult",
    "OperationStatus",
]
