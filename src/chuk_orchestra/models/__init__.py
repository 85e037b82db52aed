"""
Pydantic models for the orchestra seating system.

This module provides:
- Musician: A musician and their seat requirements
- Violinist, Cellist, Bassist: The musician variants
- Section: A capacity-bounded instrument section
- SeatOutcome: Result of a seating attempt
- OrchestraConfig: Section capacities
"""

from chuk_orchestra.models.config import OrchestraConfig
from chuk_orchestra.models.musician import (
    Bassist,
    Cellist,
    Musician,
    Violinist,
    create_musician,
)
from chuk_orchestra.models.section import SeatOutcome, Section

__all__ = [
    "Bassist",
    "Cellist",
    "Musician",
    "OrchestraConfig",
    "SeatOutcome",
    "Section",
    "Violinist",
    "create_musician",
]
