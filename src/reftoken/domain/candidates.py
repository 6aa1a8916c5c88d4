"""Domain models for completion candidates.

These Pydantic models keep candidate records consistent no matter which
collaborator produced them (database, fixture file, test fakes).
"""

from pydantic import BaseModel, Field


class IdCandidate(BaseModel):
    """A record that can be referenced with ``{id:...}``."""

    id: str = Field(..., min_length=1, description="Short identifier inserted into the text")
    title: str = Field(default="", description="Human-readable title shown next to the id")

    def to_suggestion(self) -> str:
        """Suggestion text; the part before the first ``:`` is what gets inserted."""
        return f"{self.id}: {self.title}"

    class Config:
        """Pydantic configuration."""

        frozen = True


class UuidCandidate(BaseModel):
    """A full identifier together with its short equivalent."""

    full_id: str = Field(..., min_length=1, description="Full identifier (e.g. a UUID)")
    short_id: str = Field(..., min_length=1, description="Short identifier used by ``{id:...}``")

    def to_suggestion(self) -> str:
        return f"{self.full_id}: {self.short_id}"

    class Config:
        """Pydantic configuration."""

        frozen = True
