"""
Orchestra Manager - seats musicians across the instrument sections.

Owns one Section per section type. Requests that cannot be honoured are
reported as False and logged, never raised.
"""

from __future__ import annotations

import logging
from typing import Any

from chuk_orchestra.constants import (
    DEFAULT_BASS_SEATS,
    DEFAULT_CELLO_SEATS,
    DEFAULT_VIOLIN_SEATS,
    SECTION_ORDER,
    ErrorMessages,
    MusicianKind,
    SectionType,
    SuccessMessages,
)
from chuk_orchestra.models.config import OrchestraConfig
from chuk_orchestra.models.musician import Musician
from chuk_orchestra.models.section import SeatOutcome, Section

logger = logging.getLogger(__name__)


def _describe(musician: Musician) -> str:
    return musician.name or musician.kind.value


class OrchestraManager:
    """
    Manages seating for the whole orchestra.

    A musician sits in at most one section at a time. Joining a new
    section moves the musician rather than seating them twice.
    """

    def __init__(
        self,
        violin_max: int = DEFAULT_VIOLIN_SEATS,
        cello_max: int = DEFAULT_CELLO_SEATS,
        bass_max: int = DEFAULT_BASS_SEATS,
    ):
        """
        Initialize the manager.

        Args:
            violin_max: Seats in the violin section
            cello_max: Seats in the cello section
            bass_max: Seats in the bass section

        Raises:
            pydantic.ValidationError: If any capacity is negative
        """
        self.config = OrchestraConfig(
            violin_max=violin_max,
            cello_max=cello_max,
            bass_max=bass_max,
        )
        self._sections: dict[SectionType, Section] = {
            section_type: Section(
                section_type=section_type,
                max_seats=self.config.capacity_for(section_type),
            )
            for section_type in SECTION_ORDER
        }

    @classmethod
    def from_config(cls, config: OrchestraConfig) -> OrchestraManager:
        """Create a manager sized by a config."""
        return cls(
            violin_max=config.violin_max,
            cello_max=config.cello_max,
            bass_max=config.bass_max,
        )

    @property
    def sections(self) -> list[Section]:
        """Get the sections in section order."""
        return [self._sections[s] for s in SECTION_ORDER]

    def get_section(self, section_type: SectionType | str) -> Section | None:
        """
        Get a section by type.

        Accepts the enum or its string value. Returns None if unknown.
        """
        if not isinstance(section_type, str):
            return None
        try:
            return self._sections[SectionType(section_type)]
        except ValueError:
            return None

    # Seating

    def join(self, musician: Musician | None, section_type: SectionType | str) -> bool:
        """
        Seat a musician in a section.

        The musician first leaves whatever section they are in, even if
        the new request is then rejected.

        Args:
            musician: The musician joining the orchestra
            section_type: The section the musician should sit in

        Returns:
            True if the musician was allowed in the section and there was room
        """
        if musician is None:
            logger.warning(ErrorMessages.NULL_PARAMETER.format(param="musician"))
            return False

        self.leave(musician)

        section = self.get_section(section_type)
        if section is None:
            logger.warning(
                ErrorMessages.INVALID_SECTION.format(param="section_type", value=section_type)
            )
            return False

        outcome = section.try_occupy(musician)
        kind = _describe(musician)
        section_name = section.section_type.value

        if outcome == SeatOutcome.NOT_ALLOWED:
            logger.info(ErrorMessages.NOT_ALLOWED.format(kind=kind, section=section_name))
        elif outcome == SeatOutcome.NOT_ENOUGH_SEATS:
            logger.info(ErrorMessages.NOT_ENOUGH_SEATS.format(kind=kind, section=section_name))
        elif outcome == SeatOutcome.SECTION_FULL:
            logger.info(ErrorMessages.SECTION_FULL.format(section=section_name))
        else:
            logger.info(SuccessMessages.JOINED.format(kind=kind, section=section_name))

        return outcome == SeatOutcome.ACCEPTED

    def leave(self, musician: Musician | None) -> bool:
        """
        Remove a musician from the orchestra.

        Returns True if the musician was found in a section, False otherwise.
        """
        if musician is None:
            logger.warning(ErrorMessages.NULL_PARAMETER.format(param="musician"))
            return False

        for section in self.sections:
            if section.vacate(musician):
                logger.debug(
                    SuccessMessages.LEFT.format(
                        kind=_describe(musician), section=section.section_type.value
                    )
                )
                return True
        return False

    def clear(self) -> int:
        """
        Empty every section.

        Returns the number of musicians removed.
        """
        removed = 0
        for section in self.sections:
            removed += len(section.musicians)
            section.musicians.clear()
        return removed

    # Seat counts

    def count_total_seats(self) -> int:
        """Sum the capacity of every section."""
        return sum(section.max_seats for section in self.sections)

    def count_empty_seats(self) -> int:
        """Sum the open seats of every section."""
        return sum(section.remaining_seats() for section in self.sections)

    def is_full(self) -> bool:
        """Check whether no seat is open anywhere."""
        return self.count_empty_seats() == 0

    def is_empty(self) -> bool:
        """Check whether every seat is open."""
        return self.count_empty_seats() == self.count_total_seats()

    def is_section_full(self, section_type: SectionType | str) -> bool:
        """
        Check whether a section has no open seats.

        Returns False for an unknown section type.
        """
        section = self.get_section(section_type)
        if section is None:
            return False
        return section.is_full()

    # Membership queries

    def count_musicians(self) -> int:
        """Count all seated musicians."""
        return sum(len(section.musicians) for section in self.sections)

    def count_musicians_by_kind(self, kind: MusicianKind) -> int:
        """Count the seated musicians of a given kind across all sections."""
        return sum(section.count_by_kind(kind) for section in self.sections)

    def list_musicians_by_kind(self, kind: MusicianKind) -> list[Musician]:
        """Get the seated musicians of a given kind, violin section first."""
        result: list[Musician] = []
        for section in self.sections:
            result.extend(section.list_by_kind(kind))
        return result

    def musicians_in_section(self, section_type: SectionType | str) -> list[Musician]:
        """
        Get the musicians seated in a section.

        Returns a copy; changing it does not change the section.
        Unknown section types give an empty list.
        """
        section = self.get_section(section_type)
        if section is None:
            return []
        return section.members()

    def section_of(self, musician: Musician) -> SectionType | None:
        """Find the section a musician is seated in, or None."""
        if musician is None:
            return None
        for section in self.sections:
            if section.contains(musician):
                return section.section_type
        return None

    def seating_chart(self) -> dict[str, Any]:
        """
        Summarize the seating per section.

        Produces a YAML/JSON-friendly dict.
        """
        return {
            "total_seats": self.count_total_seats(),
            "empty_seats": self.count_empty_seats(),
            "sections": {
                section.section_type.value: {
                    "max_seats": section.max_seats,
                    "occupied_seats": section.occupied_seats(),
                    "remaining_seats": section.remaining_seats(),
                    "musicians": [m.kind.value for m in section.musicians],
                }
                for section in self.sections
            },
        }

    def __repr__(self) -> str:
        return (
            f"OrchestraManager({self.count_musicians()} musicians, "
            f"{self.count_empty_seats()}/{self.count_total_seats()} seats free)"
        )
