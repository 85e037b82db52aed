"""
Musician model - who wants a seat and what it costs them.

Each musician carries a kind tag. The kind decides which sections the
musician may sit in and how many seats they take up there.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from chuk_orchestra.constants import (
    INSTRUMENTS,
    SEAT_REQUIREMENTS,
    SECTION_ORDER,
    MusicianKind,
    SectionType,
)


class Musician(BaseModel):
    """
    A musician requesting a seat.

    Musicians have no identity beyond the instance itself. Two
    ``Violinist()`` objects compare equal as values but are different
    musicians, so seating code always compares with ``is``.
    """

    kind: MusicianKind = Field(..., description="Musician variant tag")
    name: str | None = Field(None, description="Optional display name")

    model_config = {"frozen": True}

    def seats_required(self, section_type: SectionType) -> int:
        """
        Get the number of seats needed in a section.

        Returns 0 if this musician is not eligible for the section,
        including for values that are not a section at all.
        """
        if not isinstance(section_type, str):
            return 0
        try:
            section_type = SectionType(section_type)
        except ValueError:
            return 0
        return SEAT_REQUIREMENTS[self.kind].get(section_type, 0)

    def is_eligible(self, section_type: SectionType) -> bool:
        """Check whether this musician may sit in a section."""
        return self.seats_required(section_type) > 0

    def eligible_sections(self) -> list[SectionType]:
        """Get the sections this musician may sit in, in section order."""
        return [s for s in SECTION_ORDER if self.is_eligible(s)]

    def play(self) -> str:
        """Play the instrument."""
        who = self.name or self.kind.value
        return f"{who} plays the {INSTRUMENTS[self.kind]}"

    def __repr__(self) -> str:
        if self.name:
            return f"{type(self).__name__}({self.name!r})"
        return f"{type(self).__name__}()"


class Violinist(Musician):
    """Violinist - may sit anywhere, one seat each."""

    kind: Literal[MusicianKind.VIOLINIST] = MusicianKind.VIOLINIST


class Cellist(Musician):
    """Cellist - cello or bass section, one seat each."""

    kind: Literal[MusicianKind.CELLIST] = MusicianKind.CELLIST


class Bassist(Musician):
    """Bassist - two seats in the cello section, one in the bass section."""

    kind: Literal[MusicianKind.BASSIST] = MusicianKind.BASSIST


def create_musician(kind: MusicianKind | str, name: str | None = None) -> Musician:
    """
    Create a musician of the given kind.

    Args:
        kind: Musician kind (enum or its string value)
        name: Optional display name

    Returns:
        A new Violinist, Cellist or Bassist
    """
    variants: dict[MusicianKind, type[Musician]] = {
        MusicianKind.VIOLINIST: Violinist,
        MusicianKind.CELLIST: Cellist,
        MusicianKind.BASSIST: Bassist,
    }
    return variants[MusicianKind(kind)](name=name)
