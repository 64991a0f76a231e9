"""
Core Package - reco
reco/core/__init__.py

Core infrastructure: exceptions.
"""

from reco.core.exceptions import (
    ScoringException,
    TransformerConfigurationError,
)

__all__ = [
    "ScoringException",
    "TransformerConfigurationError",
]
