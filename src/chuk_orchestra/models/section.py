"""
Section model - a capacity-bounded group of seats.

A section knows its instrument type, how many seats it has, and who is
sitting in it. It decides whether a musician may take a seat.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

from chuk_orchestra.constants import MusicianKind, SectionType
from chuk_orchestra.models.musician import Musician


class SeatOutcome(str, Enum):
    """Result of a seating attempt."""

    ACCEPTED = "accepted"
    NOT_ALLOWED = "not_allowed"  # Musician is not eligible for the section
    NOT_ENOUGH_SEATS = "not_enough_seats"  # Some room, but not enough
    SECTION_FULL = "section_full"  # No room at all


class Section(BaseModel):
    """
    One instrument section of the orchestra.

    Seats are a unit of capacity; a musician may take up more than one.
    The number of occupied seats never exceeds ``max_seats``.
    """

    section_type: SectionType = Field(..., frozen=True, description="Instrument section")
    max_seats: int = Field(..., ge=0, frozen=True, description="Seat capacity")

    # Seated musicians in the order they joined
    musicians: list[Musician] = Field(default_factory=list, description="Seated musicians")

    def occupied_seats(self) -> int:
        """
        Count the seats taken in the section.

        This is not necessarily the number of musicians.
        """
        return sum(m.seats_required(self.section_type) for m in self.musicians)

    def remaining_seats(self) -> int:
        """Count the seats still open in the section."""
        return self.max_seats - self.occupied_seats()

    def is_full(self) -> bool:
        """Check whether every seat is taken."""
        return self.remaining_seats() == 0

    def is_empty(self) -> bool:
        """Check whether nobody is seated."""
        return not self.musicians

    def try_occupy(self, musician: Musician) -> SeatOutcome:
        """
        Attempt to seat a musician in the section.

        Fullness is checked before eligibility, and eligibility before
        a partial shortfall. Only an accepted musician is added.

        Args:
            musician: The musician joining the section

        Returns:
            The outcome of the attempt

        Raises:
            ValueError: If musician is None
        """
        if musician is None:
            raise ValueError("musician can not be None")

        remaining = self.remaining_seats()
        required = musician.seats_required(self.section_type)

        if remaining == 0:
            return SeatOutcome.SECTION_FULL
        if required == 0:
            return SeatOutcome.NOT_ALLOWED
        if remaining < required:
            return SeatOutcome.NOT_ENOUGH_SEATS

        self.musicians.append(musician)
        return SeatOutcome.ACCEPTED

    def vacate(self, musician: Musician) -> bool:
        """
        Remove a musician from the section.

        Returns True if the musician was seated here, False otherwise.

        Raises:
            ValueError: If musician is None
        """
        if musician is None:
            raise ValueError("musician can not be None")

        for i, seated in enumerate(self.musicians):
            if seated is musician:
                self.musicians.pop(i)
                return True
        return False

    def contains(self, musician: Musician) -> bool:
        """Check whether this exact musician is seated here."""
        if musician is None:
            raise ValueError("musician can not be None")
        return any(seated is musician for seated in self.musicians)

    def count_by_kind(self, kind: MusicianKind) -> int:
        """Count the seated musicians of a given kind."""
        return sum(1 for m in self.musicians if m.kind == kind)

    def list_by_kind(self, kind: MusicianKind) -> list[Musician]:
        """Get the seated musicians of a given kind, in join order."""
        return [m for m in self.musicians if m.kind == kind]

    def members(self) -> list[Musician]:
        """Get a snapshot of the seated musicians."""
        return list(self.musicians)
