"""
Orchestra management - seating musicians across sections.

This module provides:
- OrchestraManager: Join/leave and seat queries
- OrchestraValidator: Seating rule audit
- load_config / save_config: Section capacities as YAML
"""

from chuk_orchestra.orchestra.config_loader import load_config, save_config
from chuk_orchestra.orchestra.manager import OrchestraManager
from chuk_orchestra.orchestra.validator import (
    OrchestraValidator,
    ValidationIssue,
    ValidationResult,
    ValidationSeverity,
    validate_orchestra,
)

__all__ = [
    "OrchestraManager",
    "OrchestraValidator",
    "ValidationIssue",
    "ValidationResult",
    "ValidationSeverity",
    "load_config",
    "save_config",
    "validate_orchestra",
]
