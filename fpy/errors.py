"""exception hierarchy for fpy"""
from typing import Any


class FpyError(Exception):
    """base class for every error raised by fpy itself"""


class NotASequence(FpyError, TypeError):
    """raised when a sequence operation receives something it cannot iterate"""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(f"{type(value).__name__} is not a sequence")


class Rejected(FpyError):
    """carries a non-exception value raised through `reject`"""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(value)
