"""Pydantic response models and path grammar for the rates API."""

from .constants import (
    CURRENCY_CODE_PATTERN,
    AMOUNT_PATTERN,
)  # re-export
from .rates import RateOut, RateSetOut, RateDeletedOut, ConversionOut

__all__ = [
    "CURRENCY_CODE_PATTERN",
    "AMOUNT_PATTERN",
    "RateOut",
    "RateSetOut",
    "RateDeletedOut",
    "ConversionOut",
]
