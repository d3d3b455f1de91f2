# vocab_http_api/db/models.py

from __future__ import annotations

from typing import Optional

from sqlalchemy import Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, declarative_base, mapped_column

# ---------------------------------------------------------------------------
# Base
# ---------------------------------------------------------------------------

Base = declarative_base()


# ---------------------------------------------------------------------------
# Languages
# ---------------------------------------------------------------------------


class Language(Base):
    """
    Reference data: a language a word can be captured in or translated to.

    Seeded once at startup; never mutated by the ingestion pipeline.
    """

    __tablename__ = "languages"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(64), nullable=False)

    # Display glyph, usually a flag emoji.
    flag: Mapped[str] = mapped_column(String(16), nullable=False, default="")

    def __repr__(self) -> str:
        return f"<Language id={self.id!r} name={self.name!r}>"


# ---------------------------------------------------------------------------
# Words
# ---------------------------------------------------------------------------


class Word(Base):
    """
    A vocabulary entry keyed by (text, source language).

    ``translation`` being NULL means the word has not been translated yet;
    there is no separate status column.
    """

    __tablename__ = "words"
    __table_args__ = (
        UniqueConstraint(
            "text",
            "source_language_id",
            name="uq_words_text_source_language",
        ),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    text: Mapped[str] = mapped_column(Text, nullable=False)

    # Language ids are opaque to the pipeline; no foreign key so that words
    # can reference languages outside the seeded catalog.
    source_language_id: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        index=True,
    )

    translation: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    target_language_id: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)

    @property
    def is_translated(self) -> bool:
        return self.translation is not None

    def __repr__(self) -> str:
        return (
            f"<Word id={self.id!r} text={self.text!r} "
            f"source_language_id={self.source_language_id!r}>"
        )
