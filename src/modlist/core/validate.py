"""Strict schema check for decoded modinfo JSON records.

The registry loads its data unchecked. This module is the opt-in counterpart:
it walks the raw JSON objects (before they become `ModInfo`) and reports every
shape mismatch at once.

Messages are deterministic so that failures are easy to debug and tests can
assert on them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable

from modlist.core.model import MOD_STATUS_VALUES, MODINFO_FIELDS, OPTIONAL_TEXT_FIELDS


@dataclass(frozen=True)
class Violation:
    where: str
    message: str

    def __str__(self) -> str:  # pragma: no cover (covered indirectly by exception message)
        return f"{self.where}: {self.message}"


class SchemaViolation(ValueError):
    """Aggregates every record that does not match the `ModInfo` shape.

    The message is stable and suitable for test assertions.
    """

    def __init__(self, violations: Iterable[Violation]):
        v = list(violations)
        if not v:
            super().__init__("modinfo schema check failed (no details)")
            self.violations = []
            return
        v_sorted = sorted(v, key=lambda x: (x.where, x.message))
        msg = "modinfo schema check failed:\n" + "\n".join(f"  - {item}" for item in v_sorted)
        super().__init__(msg)
        self.violations = v_sorted


def _check_name(obj: dict[str, Any], *, where: str, violations: list[Violation]) -> None:
    if "name" not in obj:
        violations.append(Violation(where, "missing required key 'name'"))
        return
    name = obj["name"]
    if not isinstance(name, str):
        violations.append(Violation(f"{where}.name", f"expected str, got {type(name).__name__}"))
    elif not name.strip():
        violations.append(Violation(f"{where}.name", "must be a non-empty string"))


def _check_status(obj: dict[str, Any], *, where: str, violations: list[Violation]) -> None:
    if "status" not in obj:
        violations.append(Violation(where, "missing required key 'status'"))
        return
    status = obj["status"]
    if status not in MOD_STATUS_VALUES:
        allowed = ", ".join(MOD_STATUS_VALUES)
        violations.append(Violation(f"{where}.status", f"expected one of [{allowed}], got {status!r}"))


def _check_optional_text(obj: dict[str, Any], *, where: str, violations: list[Violation]) -> None:
    for key in OPTIONAL_TEXT_FIELDS:
        if key not in obj:
            continue
        value = obj[key]
        if value is None:
            violations.append(Violation(f"{where}.{key}", "must be omitted or a string; got null"))
        elif not isinstance(value, str):
            violations.append(Violation(f"{where}.{key}", f"expected str, got {type(value).__name__}"))


def _check_server(obj: dict[str, Any], *, where: str, violations: list[Violation]) -> None:
    if "server" not in obj:
        return
    server = obj["server"]
    if not isinstance(server, list):
        violations.append(Violation(f"{where}.server", f"expected JSON array, got {type(server).__name__}"))
        return
    for i, item in enumerate(server):
        if not isinstance(item, str):
            violations.append(Violation(f"{where}.server[{i}]", f"expected str, got {type(item).__name__}"))


def _check_no_extra_keys(obj: dict[str, Any], *, where: str, violations: list[Violation]) -> None:
    extras = sorted(k for k in obj if k not in MODINFO_FIELDS)
    if extras:
        violations.append(Violation(where, f"unexpected keys: {extras}"))


def check_modinfo_record(obj: Any, *, where: str) -> list[Violation]:
    """Return the violations of a single decoded record (empty if it conforms)."""
    if not isinstance(obj, dict):
        return [Violation(where, f"expected JSON object, got {type(obj).__name__}")]

    violations: list[Violation] = []
    _check_name(obj, where=where, violations=violations)
    _check_status(obj, where=where, violations=violations)
    _check_optional_text(obj, where=where, violations=violations)
    _check_server(obj, where=where, violations=violations)
    _check_no_extra_keys(obj, where=where, violations=violations)
    return violations


def validate_modinfo_records(records: Any) -> None:
    """Validate a decoded modinfo JSON array against the `ModInfo` shape.

    Raises:
        SchemaViolation: when any record violates the shape.
    """
    if not isinstance(records, list):
        raise SchemaViolation([Violation("modinfo", f"expected JSON array, got {type(records).__name__}")])

    violations: list[Violation] = []
    for i, obj in enumerate(records):
        violations.extend(check_modinfo_record(obj, where=f"modinfo[{i}]"))

    if violations:
        raise SchemaViolation(violations)


__all__ = [
    "SchemaViolation",
    "Violation",
    "check_modinfo_record",
    "validate_modinfo_records",
]
