"""
Pure text machinery for reference tokens.

Everything here is synchronous, holds no state beyond precompiled patterns and
injected collaborators, and never raises on malformed input.
"""

from .display import DisplayConverter
from .grammar import DEFAULT_GRAMMAR, LOCK_GLYPH, TokenGrammar, TokenPattern
from .guard import ProtectedSpanGuard, edit_range_between
from .rewriter import ReferenceRewriter, RewriteResult, map_cursor
from .scanner import TokenScanner
from .secure import SecureReferenceProcessor, locked_reference, wrap_selection
from .triggers import TriggerDetector

__all__ = [
    "DEFAULT_GRAMMAR",
    "LOCK_GLYPH",
    "DisplayConverter",
    "ProtectedSpanGuard",
    "ReferenceRewriter",
    "RewriteResult",
    "SecureReferenceProcessor",
    "TokenGrammar",
    "TokenPattern",
    "TokenScanner",
    "TriggerDetector",
    "edit_range_between",
    "locked_reference",
    "map_cursor",
    "wrap_selection",
]
