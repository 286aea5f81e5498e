"""
Password maker package.
"""

__version__ = "0.1.1"

from .config import Classifier, PasswordSpec, QuantumSourceConfig, DEFAULT_QUANTUM_CONFIG
from .errors import (
    PasswordMakerError,
    ValidationError,
    EmptyPoolWithMinimum,
    MinimumExceedsLength,
    NoCandidates,
    UnsupportedEncoding,
    ClipboardError,
)
from .generator import generate, generate_many
from .pool import candidates, SIMILAR_CHARACTERS
from .random_source import RandomSource, SystemRandomSource, SeededRandomSource
from .validation import validate

__all__ = [
    "Classifier",
    "PasswordSpec",
    "QuantumSourceConfig",
    "DEFAULT_QUANTUM_CONFIG",
    "PasswordMakerError",
    "ValidationError",
    "EmptyPoolWithMinimum",
    "MinimumExceedsLength",
    "NoCandidates",
    "UnsupportedEncoding",
    "ClipboardError",
    "generate",
    "generate_many",
    "candidates",
    "SIMILAR_CHARACTERS",
    "RandomSource",
    "SystemRandomSource",
    "SeededRandomSource",
    "validate",
]
