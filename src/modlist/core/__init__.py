"""modlist core: data model, strict schema check and tabular view.

This package is standalone and must not import io/cli/registry to avoid
circular dependencies.
"""

from __future__ import annotations

from .model import MOD_STATUS_VALUES, MODINFO_FIELDS, ModInfo, ModStatus
from .tables import MODINFO_COLUMNS, modinfo_to_dataframe
from .validate import SchemaViolation, Violation, check_modinfo_record, validate_modinfo_records

__all__ = [
    "MOD_STATUS_VALUES",
    "MODINFO_FIELDS",
    "ModInfo",
    "ModStatus",
    "MODINFO_COLUMNS",
    "modinfo_to_dataframe",
    "SchemaViolation",
    "Violation",
    "check_modinfo_record",
    "validate_modinfo_records",
]
