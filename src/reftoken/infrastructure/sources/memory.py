"""In-memory implementation of every reference collaborator.

Secrets are kept as plaintext in a dictionary: this store stands in for the
host's database and key management, which are out of scope here.
"""

from __future__ import annotations

import uuid
from collections.abc import Iterable, Sequence
from typing import Optional

from reftoken.domain.candidates import IdCandidate, UuidCandidate
from reftoken.domain.types.tokens import BadgeKind
from reftoken.logger import get_logger

logger = get_logger("sources.memory")


class InMemoryReferenceStore:
    """Variables, records, id mappings and secrets held in dicts.

    Implements ``VariableCandidateSource``, ``IdCandidateSource``,
    ``UuidToShortIdResolver`` and ``SecretLabelSource``.

    Example:
        >>> store = InMemoryReferenceStore(variables=["HOME"])
        >>> store.add_record("ab12", "Deploy", full_id="3f2a-...")
        >>> store.short_id_for("3f2a-...")
        'ab12'
    """

    def __init__(self, variables: Iterable[str] = ()) -> None:
        self._variables: list[str] = list(variables)
        self._records: dict[str, IdCandidate] = {}
        self._short_ids: dict[str, str] = {}
        self._secrets: dict[str, str] = {}
        self._secret_labels: dict[str, str] = {}

    # VariableCandidateSource

    def variable_names(self) -> Sequence[str]:
        return list(self._variables)

    def add_variable(self, name: str) -> None:
        if name not in self._variables:
            self._variables.append(name)

    # IdCandidateSource / UuidToShortIdResolver

    def id_candidates(self) -> Sequence[IdCandidate]:
        return list(self._records.values())

    def add_record(self, short_id: str, title: str = "", full_id: Optional[str] = None) -> None:
        self._records[short_id] = IdCandidate(id=short_id, title=title)
        if full_id:
            self._short_ids[full_id] = short_id

    def short_id_for(self, full_id: str) -> Optional[str]:
        return self._short_ids.get(full_id)

    def uuid_candidates(self) -> Sequence[UuidCandidate]:
        return [UuidCandidate(full_id=full, short_id=short) for full, short in self._short_ids.items()]

    # SecretLabelSource

    def labels(self) -> Sequence[str]:
        return list(self._secret_labels.values())

    def resolve_label(self, ref_id: str) -> Optional[str]:
        return self._secret_labels.get(ref_id)

    def find_by_label(self, label: str) -> Optional[str]:
        for ref_id, existing in self._secret_labels.items():
            if existing == label:
                return ref_id
        return None

    def decrypt(self, ref_id: str) -> Optional[str]:
        return self._secrets.get(ref_id)

    def encrypt(self, plaintext: str, label: Optional[str] = None) -> Optional[str]:
        ref_id = uuid.uuid4().hex[:8]
        self._secrets[ref_id] = plaintext
        if label:
            self._secret_labels[ref_id] = label
        logger.debug(f"Stored secret {ref_id} (label={label!r})")
        return ref_id

    def add_secret(self, ref_id: str, plaintext: str, label: Optional[str] = None) -> None:
        self._secrets[ref_id] = plaintext
        if label:
            self._secret_labels[ref_id] = label

    def update(self, ref_id: str, plaintext: str) -> bool:
        if ref_id not in self._secrets:
            return False
        self._secrets[ref_id] = plaintext
        return True


class InMemoryLabelDirectory:
    """``RecordLabelSource`` backed by a dict, with secure badges read from a store."""

    def __init__(self, store: Optional[InMemoryReferenceStore] = None) -> None:
        self._store = store
        self._labels: dict[tuple[BadgeKind, str], str] = {}

    def set_label(self, kind: BadgeKind, ref_id: str, label: str) -> None:
        self._labels[(kind, ref_id)] = label

    def resolve_label(self, kind: BadgeKind, ref_id: str) -> Optional[str]:
        if kind is BadgeKind.SECURE and self._store is not None:
            label = self._store.resolve_label(ref_id)
            if label is not None:
                return label
        return self._labels.get((kind, ref_id))
