"""KMEHR coded item helpers."""

from .cd import CDItemScheme, UnknownScheme
from .coded_item import CodedItem

__all__ = ["CDItemScheme", "CodedItem", "UnknownScheme"]
