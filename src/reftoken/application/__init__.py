"""Application layer: completion, suggestion state and the per-field engine."""

from .engine import CommandResult, EditorCommand, EngineUpdate, ReferenceEngine, ReferenceSources
from .suggestion_list import SuggestionList

__all__ = [
    "CommandResult",
    "EditorCommand",
    "EngineUpdate",
    "ReferenceEngine",
    "ReferenceSources",
    "SuggestionList",
]
