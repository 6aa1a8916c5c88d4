"""Collaborator protocols consumed by the engine.

Concrete implementations (database, keychain, encryption) belong to the host.
Every method may be called on each keystroke, so implementations should
answer from memory.
"""

from collections.abc import Sequence
from typing import Optional, Protocol

from reftoken.domain.candidates import IdCandidate, UuidCandidate
from reftoken.domain.types.tokens import BadgeKind

__all__ = [
    "VariableCandidateSource",
    "IdCandidateSource",
    "UuidToShortIdResolver",
    "SecretLabelSource",
    "RecordLabelSource",
]


class VariableCandidateSource(Protocol):
    """Provides the names offered after ``$`` and ``{var:``."""

    def variable_names(self) -> Sequence[str]:
        """Return the current list of known variable names."""
        ...


class IdCandidateSource(Protocol):
    """Provides records offered after ``{id:``."""

    def id_candidates(self) -> Sequence[IdCandidate]:
        """Return ``(id, title)`` records for record references."""
        ...


class UuidToShortIdResolver(Protocol):
    """Maps full identifiers to short ones."""

    def short_id_for(self, full_id: str) -> Optional[str]:
        """Return the short equivalent of ``full_id``, or None if unknown.

        Args:
            full_id: The identifier found inside ``{uuid:...}``

        Returns:
            Short identifier, or None when no mapping exists
        """
        ...

    def uuid_candidates(self) -> Sequence[UuidCandidate]:
        """Return every known ``(full_id, short_id)`` pair."""
        ...


class SecretLabelSource(Protocol):
    """Secret labels and the operations on their encrypted values."""

    def labels(self) -> Sequence[str]:
        """Return the labels of existing secrets."""
        ...

    def resolve_label(self, ref_id: str) -> Optional[str]:
        """Return the label of secret ``ref_id``, or None."""
        ...

    def find_by_label(self, label: str) -> Optional[str]:
        """Return the ref id of the secret labelled ``label``, or None."""
        ...

    def decrypt(self, ref_id: str) -> Optional[str]:
        """Return the plaintext of secret ``ref_id``, or None."""
        ...

    def encrypt(self, plaintext: str, label: Optional[str] = None) -> Optional[str]:
        """Store ``plaintext`` as a new secret and return its ref id, or None on failure."""
        ...

    def update(self, ref_id: str, plaintext: str) -> bool:
        """Replace the plaintext of an existing secret."""
        ...


class RecordLabelSource(Protocol):
    """Resolves badge labels for display."""

    def resolve_label(self, kind: BadgeKind, ref_id: str) -> Optional[str]:
        """Return the label for ``kind@ref_id``, or None when unknown."""
        ...
