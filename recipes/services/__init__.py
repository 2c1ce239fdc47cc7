from .errors import StepNotFound, StepOrderingError, StoreFailure, ValidationRejected
from .step_ordering import StepOrderingService
from .step_output_uses import DependencyChange, StepOutputUseService
from .step_validation import ValidationResult

__all__ = [
    "DependencyChange",
    "StepNotFound",
    "StepOrderingError",
    "StepOrderingService",
    "StepOutputUseService",
    "StoreFailure",
    "ValidationRejected",
    "ValidationResult",
]
