"""
Exceptions raised by the password maker.

Everything a caller is expected to handle derives from PasswordMakerError.
"""

from __future__ import annotations


class PasswordMakerError(Exception):
    """Generic password maker error."""


class ValidationError(PasswordMakerError):
    """The password spec cannot be satisfied."""


class EmptyPoolWithMinimum(ValidationError):
    def __init__(self, classifier: str, minimum_count: int, index: int | None = None) -> None:
        self.classifier = classifier
        self.minimum_count = minimum_count
        self.index = index
        super().__init__(
            f"{classifier} is empty, but the minimum number of characters is set to "
            f"{minimum_count}. Please set the minimum number of characters to 0."
        )


class MinimumExceedsLength(ValidationError):
    def __init__(self, total_minimum: int, length: int) -> None:
        self.total_minimum = total_minimum
        self.length = length
        super().__init__(
            "The total minimum number of characters is greater than the password length. "
            f"The total minimum number of characters is {total_minimum}, "
            f"but the password length is {length}"
        )


class NoCandidates(PasswordMakerError):
    def __init__(self) -> None:
        super().__init__(
            "No candidates for the password. Please set the candidates for the password."
        )


class UnsupportedEncoding(PasswordMakerError):
    def __init__(self, encoding: str) -> None:
        self.encoding = encoding
        super().__init__(f"Unsupported encoding: {encoding}")


class ClipboardError(PasswordMakerError):
    """Writing to the system clipboard failed."""
