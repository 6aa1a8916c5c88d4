"""Textual widgets for reference-aware text entry."""

from .autocomplete import ReferenceAutoComplete
from .reference_input import ReferenceInput

__all__ = ["ReferenceAutoComplete", "ReferenceInput"]
