"""
Orchestra seat allocation.

Musicians request seats in instrument sections; each section has a fixed
number of seats and each kind of musician has its own seat requirements.
"""

from chuk_orchestra.constants import MusicianKind, SectionType
from chuk_orchestra.models import (
    Bassist,
    Cellist,
    Musician,
    OrchestraConfig,
    SeatOutcome,
    Section,
    Violinist,
    create_musician,
)
from chuk_orchestra.orchestra import OrchestraManager, validate_orchestra

__all__ = [
    "Bassist",
    "Cellist",
    "Musician",
    "MusicianKind",
    "OrchestraConfig",
    "OrchestraManager",
    "SeatOutcome",
    "Section",
    "SectionType",
    "Violinist",
    "create_musician",
    "validate_orchestra",
]
