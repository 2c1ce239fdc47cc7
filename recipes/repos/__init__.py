from .step_repo import StepRepo
from .step_output_use_repo import StepOutputUseRepo

__all__ = ["StepRepo", "StepOutputUseRepo"]
