"""Conflict detector protocol, registry, and built-in detectors.

Each detector runs one independent check over the full record set and
returns its findings in input order. The engine runs them in registration
order, so the order of the classes in this module is the order findings are
reported in.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from nethermod_manager.matching.mod_filename import major_minor
from nethermod_manager.models.analysis import (
    Conflict,
    ConflictKind,
    Loader,
    ModRecord,
    Severity,
)
from nethermod_manager.services.conflicts.catalog import RuleCatalog

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Protocol + Registry
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class DetectionContext:
    """Server-side inputs shared by every detector in one run."""

    server_game_version: str
    server_loader: str
    catalog: RuleCatalog


class ConflictDetector(Protocol):
    """Interface that all conflict detectors must satisfy."""

    kind: ConflictKind

    def detect(
        self,
        records: Sequence[ModRecord],
        context: DetectionContext,
    ) -> list[Conflict]: ...


_DETECTORS: list[type[ConflictDetector]] = []


def register_detector(cls: type[ConflictDetector]) -> type[ConflictDetector]:
    """Class decorator that adds a detector to the global registry."""
    if cls not in _DETECTORS:
        _DETECTORS.append(cls)
    return cls


def get_all_detectors() -> list[ConflictDetector]:
    """Instantiate and return all registered detectors."""
    return [cls() for cls in _DETECTORS]  # type: ignore[misc]


# ---------------------------------------------------------------------------
# Built-in detectors
# ---------------------------------------------------------------------------


@register_detector
class DuplicateDetector:
    """Flags mod ids that appear on more than one file.

    Only the first two files of a group are named on the finding; the
    suggestion lists all of them.
    """

    kind = ConflictKind.duplicate

    def detect(
        self,
        records: Sequence[ModRecord],
        context: DetectionContext,
    ) -> list[Conflict]:
        groups: dict[str, list[str]] = {}
        for record in records:
            groups.setdefault(record.mod_id, []).append(record.name)

        conflicts: list[Conflict] = []
        for mod_id, names in groups.items():
            if len(names) < 2:
                continue
            conflicts.append(
                Conflict(
                    kind=self.kind,
                    severity=Severity.error,
                    primary=names[0],
                    secondary=names[1],
                    message=f"Duplicate mod detected: {mod_id}",
                    suggestion=f"Remove all but one of these versions: {', '.join(names)}",
                )
            )
        return conflicts


@register_detector
class IncompatibilityDetector:
    """Flags ordered pairs the catalog lists as incompatible.

    Pairs are walked in both directions, so a rule listed on both sides
    produces two findings for the same two files.
    """

    kind = ConflictKind.incompatibility

    def detect(
        self,
        records: Sequence[ModRecord],
        context: DetectionContext,
    ) -> list[Conflict]:
        conflicts: list[Conflict] = []
        for first in records:
            incompatible_ids = context.catalog.incompatible_with(first.mod_id)
            if not incompatible_ids:
                continue
            for second in records:
                if second.mod_id not in incompatible_ids:
                    continue
                conflicts.append(
                    Conflict(
                        kind=self.kind,
                        severity=Severity.error,
                        primary=first.name,
                        secondary=second.name,
                        message=(
                            f"Incompatibility detected between {first.name} and {second.name}"
                        ),
                        suggestion="These mods cannot run together. Disable one of the two.",
                    )
                )
        return conflicts


@register_detector
class MissingDependencyDetector:
    kind = ConflictKind.missing_dependency

    def detect(
        self,
        records: Sequence[ModRecord],
        context: DetectionContext,
    ) -> list[Conflict]:
        present = {record.mod_id for record in records}
        conflicts: list[Conflict] = []
        for record in records:
            for dependency in context.catalog.requires(record.mod_id):
                if dependency in present:
                    continue
                conflicts.append(
                    Conflict(
                        kind=self.kind,
                        severity=Severity.warning,
                        primary=record.name,
                        message=f"Missing dependency: {dependency}",
                        suggestion=f"Install {dependency} so that {record.name} can load.",
                    )
                )
        return conflicts


@register_detector
class VersionMismatchDetector:
    """Compares major.minor of each mod's game version with the server's."""

    kind = ConflictKind.version_mismatch

    def detect(
        self,
        records: Sequence[ModRecord],
        context: DetectionContext,
    ) -> list[Conflict]:
        server_version = context.server_game_version
        if not server_version:
            return []
        server_major = major_minor(server_version)

        conflicts: list[Conflict] = []
        for record in records:
            if not record.game_version:
                continue
            if major_minor(record.game_version) == server_major:
                continue
            conflicts.append(
                Conflict(
                    kind=self.kind,
                    severity=Severity.warning,
                    primary=record.name,
                    message=(
                        f"Version mismatch: {record.name} targets {record.game_version}, "
                        f"server runs {server_version}"
                    ),
                    suggestion=f"Download a build of {record.name} for {server_version}.",
                )
            )
        return conflicts


@register_detector
class LoaderMismatchDetector:
    kind = ConflictKind.loader_incompatible

    def detect(
        self,
        records: Sequence[ModRecord],
        context: DetectionContext,
    ) -> list[Conflict]:
        server_loader = context.server_loader.strip().lower()
        conflicts: list[Conflict] = []
        for record in records:
            if record.loader is Loader.unknown or record.loader.value == server_loader:
                continue
            conflicts.append(
                Conflict(
                    kind=self.kind,
                    severity=Severity.error,
                    primary=record.name,
                    message=(
                        f"Loader mismatch: {record.name} is built for {record.loader.value}, "
                        f"server uses {context.server_loader}"
                    ),
                    suggestion=(
                        f"This mod will not load. Find a {context.server_loader} build instead."
                    ),
                )
            )
        return conflicts
