"""Run the registered detectors over one snapshot of a server's mods."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from nethermod_manager.matching.mod_filename import parse_mod_filename
from nethermod_manager.models.analysis import Conflict, ModAnalysis, ModRecord
from nethermod_manager.services.conflicts.catalog import RuleCatalog, get_rule_catalog
from nethermod_manager.services.conflicts.detectors import DetectionContext, get_all_detectors
from nethermod_manager.services.conflicts.scoring import score_conflicts

logger = logging.getLogger(__name__)


def detect_conflicts(
    records: Sequence[ModRecord],
    server_game_version: str,
    server_loader: str,
    catalog: RuleCatalog | None = None,
) -> list[Conflict]:
    """Return every finding for *records*, grouped by check in fixed order.

    Uses the active rule catalog unless *catalog* is given. The result depends
    only on the arguments: the same records in the same order always give the
    same list.
    """
    context = DetectionContext(
        server_game_version=server_game_version,
        server_loader=server_loader,
        catalog=catalog if catalog is not None else get_rule_catalog(),
    )

    conflicts: list[Conflict] = []
    for detector in get_all_detectors():
        found = detector.detect(records, context)
        logger.debug("Detector %s found %d conflicts", detector.kind, len(found))
        conflicts.extend(found)
    return conflicts


def analyze_mods(
    file_names: Iterable[str],
    server_game_version: str,
    server_loader: str,
    catalog: RuleCatalog | None = None,
) -> ModAnalysis:
    """Parse *file_names*, detect conflicts and score the result."""
    records = tuple(parse_mod_filename(name) for name in file_names)
    conflicts = tuple(detect_conflicts(records, server_game_version, server_loader, catalog))
    return ModAnalysis(
        records=records,
        conflicts=conflicts,
        report=score_conflicts(conflicts, total_mods=len(records)),
    )
