from .error_code_reconciler import ErrorCodeReconciler, ReconcileOutcome
from .error_code_service import ErrorCodeService
from .error_code_validators import validate_code_duplicate, validate_error_code_exists

__all__ = [
    "ErrorCodeReconciler",
    "ErrorCodeService",
    "ReconcileOutcome",
    "validate_code_duplicate",
    "validate_error_code_exists",
]
