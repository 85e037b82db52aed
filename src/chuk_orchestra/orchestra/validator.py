"""
Orchestra Validator - audits seating against the orchestra rules.

Validates:
- No section holds more seats than its capacity
- A musician is seated at most once across the orchestra
- Every seated musician is eligible for their section
- Sections with no capacity or no remaining seats
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from chuk_orchestra.orchestra.manager import OrchestraManager


class ValidationSeverity(str, Enum):
    """How serious a seating issue is."""

    ERROR = "error"  # Seating rule broken
    WARNING = "warning"  # Legal but probably a mistake
    INFO = "info"  # Informational only


@dataclass
class ValidationIssue:
    """One problem found in the seating, with where it was found."""

    severity: ValidationSeverity
    code: str
    message: str
    location: str | None = None

    def __str__(self) -> str:
        prefix = f"[{self.severity.value.upper()}]"
        location = f" at {self.location}" if self.location else ""
        return f"{prefix} {self.code}: {self.message}{location}"


class ValidationResult:
    """Issues collected while auditing an orchestra."""

    def __init__(self) -> None:
        self.issues: list[ValidationIssue] = []

    def _add(
        self, severity: ValidationSeverity, code: str, message: str, location: str | None
    ) -> None:
        self.issues.append(ValidationIssue(severity, code, message, location))

    def add_error(self, code: str, message: str, location: str | None = None) -> None:
        """Record a broken seating rule."""
        self._add(ValidationSeverity.ERROR, code, message, location)

    def add_warning(self, code: str, message: str, location: str | None = None) -> None:
        """Record a legal but suspicious setup."""
        self._add(ValidationSeverity.WARNING, code, message, location)

    def add_info(self, code: str, message: str, location: str | None = None) -> None:
        """Record an informational note."""
        self._add(ValidationSeverity.INFO, code, message, location)

    def _with_severity(self, severity: ValidationSeverity) -> list[ValidationIssue]:
        return [i for i in self.issues if i.severity == severity]

    @property
    def is_valid(self) -> bool:
        """True when no seating rule is broken; warnings and notes are allowed."""
        return not self.errors

    @property
    def errors(self) -> list[ValidationIssue]:
        """Issues that break a seating rule."""
        return self._with_severity(ValidationSeverity.ERROR)

    @property
    def warnings(self) -> list[ValidationIssue]:
        """Issues worth a second look."""
        return self._with_severity(ValidationSeverity.WARNING)

    @property
    def infos(self) -> list[ValidationIssue]:
        """Informational notes, such as full sections."""
        return self._with_severity(ValidationSeverity.INFO)

    def codes(self) -> list[str]:
        """Get the issue codes in the order they were found."""
        return [i.code for i in self.issues]

    def __bool__(self) -> bool:
        """A result is truthy when the orchestra is valid."""
        return self.is_valid

    def __str__(self) -> str:
        if not self.issues:
            return "Validation passed: no issues found"
        return "\n".join(str(issue) for issue in self.issues)


class OrchestraValidator:
    """Validates orchestra seating. Never changes the orchestra."""

    def validate(self, orchestra: OrchestraManager) -> ValidationResult:
        """
        Validate an orchestra.

        Args:
            orchestra: The orchestra to validate

        Returns:
            ValidationResult with any issues found
        """
        result = ValidationResult()

        self._validate_capacity(orchestra, result)
        self._validate_eligibility(orchestra, result)
        self._validate_membership(orchestra, result)

        return result

    def _validate_capacity(self, orchestra: OrchestraManager, result: ValidationResult) -> None:
        """Check seat counts against section capacity."""
        for section in orchestra.sections:
            name = section.section_type.value
            occupied = section.occupied_seats()

            if section.max_seats == 0:
                result.add_warning(
                    "NO_CAPACITY",
                    f"Section '{name}' has no seats",
                    f"sections/{name}",
                )

            if occupied > section.max_seats:
                result.add_error(
                    "OVER_CAPACITY",
                    f"Section '{name}' uses {occupied} of {section.max_seats} seats",
                    f"sections/{name}",
                )
            elif occupied == section.max_seats and section.max_seats > 0:
                result.add_info(
                    "SECTION_FULL",
                    f"Section '{name}' is full",
                    f"sections/{name}",
                )

    def _validate_eligibility(self, orchestra: OrchestraManager, result: ValidationResult) -> None:
        """Check that every member may sit in their section."""
        for section in orchestra.sections:
            name = section.section_type.value
            for position, musician in enumerate(section.musicians):
                if not musician.is_eligible(section.section_type):
                    result.add_error(
                        "INELIGIBLE_MEMBER",
                        f"{musician.kind.value} is not allowed in {name}",
                        f"sections/{name}/musicians/{position}",
                    )

    def _validate_membership(self, orchestra: OrchestraManager, result: ValidationResult) -> None:
        """Check that no musician instance is seated twice."""
        seen: dict[int, str] = {}

        for section in orchestra.sections:
            name = section.section_type.value
            for position, musician in enumerate(section.musicians):
                location = f"sections/{name}/musicians/{position}"
                previous = seen.get(id(musician))
                if previous is not None:
                    result.add_error(
                        "DUPLICATE_MEMBER",
                        f"{musician.kind.value} is already seated in {previous}",
                        location,
                    )
                else:
                    seen[id(musician)] = name


def validate_orchestra(orchestra: OrchestraManager) -> ValidationResult:
    """
    Convenience function to validate an orchestra.

    Args:
        orchestra: The orchestra to validate

    Returns:
        ValidationResult with any issues found
    """
    validator = OrchestraValidator()
    return validator.validate(orchestra)
