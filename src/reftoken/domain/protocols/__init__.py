"""Domain protocols - interfaces for the collaborators a host injects.

Using protocols keeps the engine free of global state and lets tests drive it
with plain fakes.
"""

from reftoken.domain.protocols.sources import (
    IdCandidateSource,
    RecordLabelSource,
    SecretLabelSource,
    UuidToShortIdResolver,
    VariableCandidateSource,
)

__all__ = [
    "IdCandidateSource",
    "RecordLabelSource",
    "SecretLabelSource",
    "UuidToShortIdResolver",
    "VariableCandidateSource",
]
