"""Value types produced by the mod compatibility analysis engine.

None of these are persisted: records and conflicts are rebuilt on every
analysis run from the current file listing and discarded afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class Loader(StrEnum):
    """Mod-loading framework a mod or server targets."""

    forge = "forge"
    neoforge = "neoforge"
    fabric = "fabric"
    quilt = "quilt"
    unknown = "unknown"


class ConflictKind(StrEnum):
    """Category of compatibility finding."""

    incompatibility = "incompatibility"
    missing_dependency = "missing_dependency"
    duplicate = "duplicate"
    version_mismatch = "version_mismatch"
    loader_incompatible = "loader_incompatible"


class Severity(StrEnum):
    """Finding severity: error blocks startup, warning degrades, info advises."""

    error = "error"
    warning = "warning"
    info = "info"


class HealthStatus(StrEnum):
    excellent = "excellent"
    good = "good"
    warning = "warning"
    critical = "critical"


@dataclass(frozen=True, slots=True)
class ModRecord:
    file_name: str
    name: str
    mod_id: str
    loader: Loader = Loader.unknown
    version: str | None = None
    game_version: str | None = None


@dataclass(frozen=True, slots=True)
class Conflict:
    kind: ConflictKind
    severity: Severity
    primary: str
    message: str
    secondary: str | None = None
    suggestion: str | None = None


@dataclass(frozen=True, slots=True)
class HealthReport:
    total_mods: int
    error_count: int
    warning_count: int
    info_count: int
    score: int
    status: HealthStatus


@dataclass(frozen=True, slots=True)
class ModAnalysis:
    """Full result of one analysis pass over a set of mod files."""

    records: tuple[ModRecord, ...]
    conflicts: tuple[Conflict, ...]
    report: HealthReport
