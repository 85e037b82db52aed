"""
Constants and enums for the orchestra seating system.

No magic strings - use enums for section types and musician kinds.
"""

from enum import Enum


class SectionType(str, Enum):
    """Instrument sections of the orchestra."""

    VIOLIN = "violin"
    CELLO = "cello"
    BASS = "bass"


class MusicianKind(str, Enum):
    """
    Variant tag for musicians.

    Filtering by variant uses this tag rather than the Python class.
    """

    VIOLINIST = "violinist"
    CELLIST = "cellist"
    BASSIST = "bassist"


# Fixed scan order for cross-section operations
SECTION_ORDER: tuple[SectionType, ...] = (
    SectionType.VIOLIN,
    SectionType.CELLO,
    SectionType.BASS,
)

# Seats required per kind and section (absent = not eligible)
SEAT_REQUIREMENTS: dict[MusicianKind, dict[SectionType, int]] = {
    MusicianKind.VIOLINIST: {
        SectionType.VIOLIN: 1,
        SectionType.CELLO: 1,
        SectionType.BASS: 1,
    },
    MusicianKind.CELLIST: {
        SectionType.CELLO: 1,
        SectionType.BASS: 1,
    },
    MusicianKind.BASSIST: {
        SectionType.CELLO: 2,
        SectionType.BASS: 1,
    },
}

# Instrument played by each kind
INSTRUMENTS: dict[MusicianKind, str] = {
    MusicianKind.VIOLINIST: "violin",
    MusicianKind.CELLIST: "cello",
    MusicianKind.BASSIST: "double bass",
}

# Default section capacities
DEFAULT_VIOLIN_SEATS = 16
DEFAULT_CELLO_SEATS = 12
DEFAULT_BASS_SEATS = 8

# Timestamp and calling function for every diagnostic
LOG_FORMAT = "%(asctime)s => Caller: %(funcName)s / Message: %(message)s"


class ErrorMessages:
    """Standardized diagnostic messages for rejected requests."""

    NULL_PARAMETER = "parameter: {param} can not be null"
    INVALID_SECTION = "parameter: '{param}' value: '{value}' is not a valid section"
    NOT_ALLOWED = "{kind} is not allowed in {section}"
    NOT_ENOUGH_SEATS = "{section} does not have enough free seats for a {kind}"
    SECTION_FULL = "{section} is full."


class SuccessMessages:
    """Standardized diagnostic messages for accepted requests."""

    JOINED = "{kind} was able to join {section}"
    LEFT = "{kind} left {section}"
