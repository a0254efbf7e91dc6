"""
Static commentary export data model.
"""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_SOURCE_NAME = "Ibn Kathir, traduit en français"


class CommentaryExport(BaseModel):
    """
    Pre-extracted commentary for many verses, stored as one JSON document.

    Written by the export script and read back by StaticCommentaryStore.
    Field names are serialized in camelCase to keep the on-disk format.

    Attributes:
        version: Format version
        generated_at: Timestamp of the last write
        source: Attribution of the commentary text
        last_surah_completed: Highest surah fully exported (for resumption)
        verses: Mapping from "chapter:verse" to sanitized HTML text
    """

    model_config = ConfigDict(populate_by_name=True)

    version: int = Field(
        default=1,
        description="Format version",
    )
    generated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        alias="generatedAt",
        description="Timestamp of the last write",
    )
    source: str = Field(
        default=DEFAULT_SOURCE_NAME,
        description="Attribution of the commentary text",
    )
    last_surah_completed: int = Field(
        default=0,
        alias="lastSurahCompleted",
        description="Highest surah fully exported",
        ge=0,
    )
    verses: dict[str, str] = Field(
        default_factory=dict,
        description='Mapping from "chapter:verse" to sanitized commentary',
    )

    @property
    def verse_count(self) -> int:
        """Number of exported verses."""
        return len(self.verses)

    def to_json(self) -> str:
        """Serialize with the camelCase on-disk field names."""
        return self.model_dump_json(by_alias=True, indent=2)
