"""
Custom Exceptions - reco
reco/core/exceptions.py

Custom exception classes for scoring configuration.
"""

from typing import Any


class ScoringException(Exception):
    """Base exception for scoring operations."""

    pass


class TransformerConfigurationError(ScoringException):
    """A score transformer was configured with an unusable parameter."""

    def __init__(self, parameter: str, value: Any, reason: str = "invalid value"):
        self.parameter = parameter
        self.value = value
        self.reason = reason
        super().__init__(f"{parameter}={value!r}: {reason}")
