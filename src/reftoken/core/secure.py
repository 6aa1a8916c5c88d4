"""
Secret reference processing around save and execution.

Plaintext typed as ``{secure:VALUE}`` never reaches storage: on save it is
encrypted through the host's secret store and replaced by a locked
``{🔒:REFID}`` reference. ``{secure#LABEL:VALUE}`` files the value under a
label and stores a ```secure@REFID``` badge instead.
"""

from __future__ import annotations

import re
from typing import Callable, Optional

from reftoken.domain.protocols import SecretLabelSource
from reftoken.domain.types.tokens import TextRange, TokenKind
from reftoken.logger import get_logger

from .grammar import DEFAULT_GRAMMAR, LABELED_SECURE_INPUT, LOCK_GLYPH, TokenGrammar

logger = get_logger("secure")


def locked_reference(value: str) -> str:
    return f"{{{LOCK_GLYPH}:{value}}}"


def wrap_selection(text: str, selection: TextRange) -> tuple[str, int]:
    """Wrap the selected text as ``{secure:...}``.

    Returns:
        ``(new_text, cursor)`` with the cursor after the closing brace, or the
        text unchanged (cursor at the selection end) when nothing is selected
        or the selection contains a ``}`` that would end the input early
    """
    if selection.is_empty or selection.start < 0 or selection.end > len(text):
        return text, min(max(selection.end, 0), len(text))
    selected = text[selection.start : selection.end]
    if "}" in selected:
        logger.warning(f"Selection [{selection.start}, {selection.end}) contains '}}'; not wrapping it as a secret")
        return text, selection.end
    replacement = f"{{secure:{selected}}}"
    new_text = text[: selection.start] + replacement + text[selection.end :]
    return new_text, selection.start + len(replacement)


class SecureReferenceProcessor:
    """Converts secret references between their typed, stored and executable forms."""

    def __init__(self, secrets: SecretLabelSource, grammar: TokenGrammar = DEFAULT_GRAMMAR) -> None:
        self._secrets = secrets
        self._secure_input = grammar.pattern_for(TokenKind.SECURE_INPUT_REF)
        self._locked = grammar.pattern_for(TokenKind.LOCKED_REF)
        self._labeled = LABELED_SECURE_INPUT.compiled

    def process_for_save(self, text: str) -> str:
        """Encrypt every plaintext secret and replace it with its stored form.

        A value whose encryption fails is left in place untouched.
        """
        text = self._substitute(self._labeled, text, self._save_labeled)
        return self._substitute(self._secure_input, text, self._save_plain)

    def process_for_execution(self, text: str) -> str:
        """Replace every locked reference with its decrypted plaintext.

        The locked value may be a ref id or a label. References that cannot be
        decrypted stay as they are.
        """
        return self._substitute(self._locked, text, self._reveal)

    def update_secret(self, ref_id: str, plaintext: str) -> bool:
        try:
            return bool(self._secrets.update(ref_id, plaintext))
        except Exception:
            logger.exception(f"Updating secret {ref_id!r} failed")
            return False

    def _save_plain(self, match: re.Match[str]) -> Optional[str]:
        ref_id = self._call(self._secrets.encrypt, match.group(1))
        if not ref_id:
            logger.warning("Encryption returned nothing; leaving secure input in place")
            return None
        return locked_reference(ref_id)

    def _save_labeled(self, match: re.Match[str]) -> Optional[str]:
        label, value = match.group(1), match.group(2)
        ref_id = self._call(self._secrets.find_by_label, label)
        if not ref_id:
            ref_id = self._call(self._secrets.encrypt, value, label)
        if not ref_id:
            logger.warning(f"Could not store secret labelled {label!r}; leaving input in place")
            return None
        return f"`secure@{ref_id}`"

    def _reveal(self, match: re.Match[str]) -> Optional[str]:
        value = match.group(1)
        ref_id = self._call(self._secrets.find_by_label, value) or value
        return self._call(self._secrets.decrypt, ref_id)

    @staticmethod
    def _call(method: Callable[..., Optional[str]], *args: str) -> Optional[str]:
        try:
            return method(*args)
        except Exception:
            logger.exception(f"Secret store call {method.__name__} failed")
            return None

    @staticmethod
    def _substitute(
        pattern: Optional[re.Pattern[str]],
        text: str,
        replace: Callable[[re.Match[str]], Optional[str]],
    ) -> str:
        if pattern is None:
            return text

        def _sub(match: re.Match[str]) -> str:
            replacement = replace(match)
            return match.group(0) if replacement is None else replacement

        return pattern.sub(_sub, text)
