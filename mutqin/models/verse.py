"""
Verse (ayah) data model.
"""

from pydantic import BaseModel, Field, model_validator


class Verse(BaseModel):
    """
    A single ayah annotated with its structural position in the mushaf.

    Verses are immutable once loaded. Field aliases accept the on-disk
    names of the 13-line dataset (``text_indopak``, ``page_13line``,
    ``juz_number``).

    Attributes:
        verse_key: Composite key "<surah>:<ayah>"
        surah: Surah number (1-114)
        ayah: Ayah number within the surah (1-based)
        text: Display text of the ayah
        page: Page number in the 13-line layout (1-based)
        line_numbers: Lines the ayah occupies on its page
        global_order: Position of the ayah in the whole text
        juz: Juz number (1-30)
        ruku_global: Ruku identifier across the whole text
        ruku_in_juz: Ruku ordinal within its juz
        is_ruku_start: First ayah of its ruku
        is_page_start: First ayah on its page
        is_page_end: Last ayah on its page
    """

    verse_key: str = Field(
        ...,
        description='Composite key "<surah>:<ayah>"',
        pattern=r"^\d+:\d+$",
    )
    surah: int = Field(
        ...,
        description="Surah number (1-114)",
        ge=1,
        le=114,
    )
    ayah: int = Field(
        ...,
        description="Ayah number within the surah (1-based)",
        ge=1,
    )
    text: str = Field(
        default="",
        description="Display text of the ayah",
        alias="text_indopak",
    )
    page: int = Field(
        ...,
        description="Page number in the 13-line layout (1-based)",
        alias="page_13line",
        ge=1,
    )
    line_numbers: tuple[int, ...] = Field(
        default=(),
        description="Lines the ayah occupies on its page",
    )
    global_order: int = Field(
        ...,
        description="Position of the ayah in the whole text",
    )
    juz: int = Field(
        ...,
        description="Juz number (1-30)",
        alias="juz_number",
        ge=1,
        le=30,
    )
    ruku_global: int = Field(
        ...,
        description="Ruku identifier across the whole text",
    )
    ruku_in_juz: int = Field(
        ...,
        description="Ruku ordinal within its juz",
    )
    is_ruku_start: bool = Field(default=False)
    is_page_start: bool = Field(default=False)
    is_page_end: bool = Field(default=False)

    model_config = {
        "frozen": True,
        "populate_by_name": True,
        "json_schema_extra": {
            "examples": [
                {
                    "verse_key": "1:1",
                    "surah": 1,
                    "ayah": 1,
                    "text_indopak": "بِسۡمِ اللّٰهِ الرَّحۡمٰنِ الرَّحِيۡمِ",
                    "page_13line": 1,
                    "line_numbers": [2],
                    "global_order": 1,
                    "juz_number": 1,
                    "ruku_global": 1,
                    "ruku_in_juz": 1,
                    "is_ruku_start": True,
                    "is_page_start": True,
                    "is_page_end": False,
                }
            ]
        },
    }

    @model_validator(mode="after")
    def _check_verse_key(self) -> "Verse":
        if self.verse_key != f"{self.surah}:{self.ayah}":
            raise ValueError(
                f"verse_key {self.verse_key!r} does not match surah {self.surah} ayah {self.ayah}"
            )
        return self

    def __str__(self) -> str:
        return f"Verse({self.verse_key})"

    def __repr__(self) -> str:
        return (
            f"Verse(verse_key={self.verse_key!r}, global_order={self.global_order}, "
            f"page={self.page}, juz={self.juz}, ruku_global={self.ruku_global})"
        )
