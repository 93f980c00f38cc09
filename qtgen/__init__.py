"""qtgen: manifest-driven scaffolding for Qt C++ and Qt for Python classes."""

from .errors import (
    FieldExpansionError,
    GeneratorError,
    GuardEvaluationError,
    InvalidTargetError,
    ManifestLoadError,
    OutputWriteError,
    RenderError,
)
from .generator import GenerationRequest, GenerationResult, Generator, GeneratorState
from .targets import TargetCategory, TargetType

__version__ = "0.1.0"

__all__ = [
    "FieldExpansionError",
    "GenerationRequest",
    "GenerationResult",
    "Generator",
    "GeneratorError",
    "GeneratorState",
    "GuardEvaluationError",
    "InvalidTargetError",
    "ManifestLoadError",
    "OutputWriteError",
    "RenderError",
    "TargetCategory",
    "TargetType",
    "__version__",
]
