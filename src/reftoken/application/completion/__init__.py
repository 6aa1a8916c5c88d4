"""
Completion strategies for the reference engine.

This package provides a strategy-based decomposition for the different
trigger families (records, full ids, variables, secret labels) plus the
committer that writes a chosen suggestion back into the text.
"""

from .applier import ApplyResult, InsertionCommitter
from .id_completion import IdCompletionStrategy
from .orchestrator import DEFAULT_MAX_SUGGESTIONS, SuggestionEngine
from .secure_completion import SecureLabelCompletionStrategy
from .strategy import CompletionRequest, CompletionStrategy
from .uuid_completion import UuidCompletionStrategy
from .variable_completion import VariableCompletionStrategy

__all__ = [
    "ApplyResult",
    "CompletionRequest",
    "CompletionStrategy",
    "DEFAULT_MAX_SUGGESTIONS",
    "IdCompletionStrategy",
    "InsertionCommitter",
    "SecureLabelCompletionStrategy",
    "SuggestionEngine",
    "UuidCompletionStrategy",
    "VariableCompletionStrategy",
]
