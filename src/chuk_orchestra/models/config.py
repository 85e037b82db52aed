"""
Orchestra configuration - the three section capacities.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from chuk_orchestra.constants import (
    DEFAULT_BASS_SEATS,
    DEFAULT_CELLO_SEATS,
    DEFAULT_VIOLIN_SEATS,
    SectionType,
)


class OrchestraConfig(BaseModel):
    """Seat capacity for each section."""

    violin_max: int = Field(DEFAULT_VIOLIN_SEATS, ge=0, description="Violin section seats")
    cello_max: int = Field(DEFAULT_CELLO_SEATS, ge=0, description="Cello section seats")
    bass_max: int = Field(DEFAULT_BASS_SEATS, ge=0, description="Bass section seats")

    model_config = {"frozen": True}

    def capacity_for(self, section_type: SectionType) -> int:
        """Get the configured capacity of a section."""
        capacities = {
            SectionType.VIOLIN: self.violin_max,
            SectionType.CELLO: self.cello_max,
            SectionType.BASS: self.bass_max,
        }
        return capacities[section_type]

    def total_seats(self) -> int:
        """Sum the capacity of all three sections."""
        return self.violin_max + self.cello_max + self.bass_max

    def to_yaml_dict(self) -> dict[str, Any]:
        """Convert to a YAML-friendly dict."""
        return {
            "sections": {
                SectionType.VIOLIN.value: self.violin_max,
                SectionType.CELLO.value: self.cello_max,
                SectionType.BASS.value: self.bass_max,
            },
        }

    @classmethod
    def from_yaml_dict(cls, data: dict[str, Any] | None) -> OrchestraConfig:
        """
        Create a config from a YAML-parsed dict.

        Missing sections fall back to the defaults.

        Raises:
            ValueError: If the document or its sections are not mappings
        """
        data = data or {}
        if not isinstance(data, dict):
            raise ValueError(f"Orchestra config must be a mapping, got {type(data).__name__}")

        sections = data.get("sections") or {}
        if not isinstance(sections, dict):
            raise ValueError(
                f"Orchestra config sections must be a mapping, got {type(sections).__name__}"
            )
        return cls(
            violin_max=sections.get(SectionType.VIOLIN.value, DEFAULT_VIOLIN_SEATS),
            cello_max=sections.get(SectionType.CELLO.value, DEFAULT_CELLO_SEATS),
            bass_max=sections.get(SectionType.BASS.value, DEFAULT_BASS_SEATS),
        )
