"""Mod compatibility analysis: filename records in, scored findings out."""

from nethermod_manager.services.conflicts.catalog import (
    DEFAULT_RULE_CATALOG,
    RuleCatalog,
    get_rule_catalog,
    load_rule_catalog,
    set_rule_catalog,
)
from nethermod_manager.services.conflicts.detectors import get_all_detectors
from nethermod_manager.services.conflicts.engine import analyze_mods, detect_conflicts
from nethermod_manager.services.conflicts.scoring import score_conflicts
from nethermod_manager.services.conflicts.suggestions import suggestions_for

__all__ = [
    "DEFAULT_RULE_CATALOG",
    "RuleCatalog",
    "analyze_mods",
    "detect_conflicts",
    "get_all_detectors",
    "get_rule_catalog",
    "load_rule_catalog",
    "score_conflicts",
    "set_rule_catalog",
    "suggestions_for",
]
