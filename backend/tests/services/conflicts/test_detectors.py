"""Unit tests for individual conflict detectors."""

import pytest

from nethermod_manager.matching.mod_filename import parse_mod_filename
from nethermod_manager.models.analysis import ConflictKind, Loader, ModRecord, Severity
from nethermod_manager.services.conflicts.catalog import DEFAULT_RULE_CATALOG, RuleCatalog
from nethermod_manager.services.conflicts.detectors import (
    DetectionContext,
    DuplicateDetector,
    IncompatibilityDetector,
    LoaderMismatchDetector,
    MissingDependencyDetector,
    VersionMismatchDetector,
    get_all_detectors,
)


def _records(*file_names: str) -> list[ModRecord]:
    return [parse_mod_filename(f) for f in file_names]


def _context(
    game_version: str = "1.20.1",
    loader: str = "forge",
    catalog: RuleCatalog = DEFAULT_RULE_CATALOG,
) -> DetectionContext:
    return DetectionContext(server_game_version=game_version, server_loader=loader, catalog=catalog)


@pytest.fixture
def empty_catalog():
    return RuleCatalog.from_mapping()


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------


class TestRegistry:
    def test_detectors_run_in_fixed_order(self):
        kinds = [d.kind for d in get_all_detectors()]
        assert kinds == [
            ConflictKind.duplicate,
            ConflictKind.incompatibility,
            ConflictKind.missing_dependency,
            ConflictKind.version_mismatch,
            ConflictKind.loader_incompatible,
        ]


# ---------------------------------------------------------------------------
# DuplicateDetector
# ---------------------------------------------------------------------------


class TestDuplicateDetector:
    def test_same_mod_id_reported_once(self):
        records = _records("forge-1.20.1-buildA.jar", "forge-1.20.1-buildB.jar")
        conflicts = DuplicateDetector().detect(records, _context())
        assert len(conflicts) == 1
        assert conflicts[0].kind == ConflictKind.duplicate
        assert conflicts[0].severity == Severity.error
        assert conflicts[0].primary == "forge-1.20.1-buildA"
        assert conflicts[0].secondary == "forge-1.20.1-buildB"
        assert conflicts[0].message == "Duplicate mod detected: forge"

    def test_third_copy_only_in_suggestion(self):
        records = _records("jei-1.jar", "jei-2.jar", "jei-3.jar")
        conflicts = DuplicateDetector().detect(records, _context())
        assert len(conflicts) == 1
        assert conflicts[0].primary == "jei-1"
        assert conflicts[0].secondary == "jei-2"
        assert "jei-3" in conflicts[0].suggestion

    def test_groups_reported_in_first_seen_order(self):
        records = _records("b-1.jar", "a-1.jar", "a-2.jar", "b-2.jar")
        conflicts = DuplicateDetector().detect(records, _context())
        assert [c.primary for c in conflicts] == ["b-1", "a-1"]

    def test_distinct_ids_no_conflict(self):
        records = _records("create-1.20.1.jar", "flywheel-1.20.1.jar")
        assert DuplicateDetector().detect(records, _context()) == []

    def test_empty_mod_ids_group_together(self):
        records = _records("", ".jar")
        conflicts = DuplicateDetector().detect(records, _context())
        assert len(conflicts) == 1
        assert conflicts[0].message == "Duplicate mod detected: "


# ---------------------------------------------------------------------------
# IncompatibilityDetector
# ---------------------------------------------------------------------------


class TestIncompatibilityDetector:
    def test_mutual_rule_reported_in_both_directions(self):
        records = _records("optifine-1.20.1.jar", "sodium-1.20.1.jar")
        conflicts = IncompatibilityDetector().detect(records, _context())
        assert [(c.primary, c.secondary) for c in conflicts] == [
            ("optifine-1.20.1", "sodium-1.20.1"),
            ("sodium-1.20.1", "optifine-1.20.1"),
        ]
        assert all(c.severity == Severity.error for c in conflicts)

    def test_one_directional_rule_reported_once(self):
        catalog = RuleCatalog.from_mapping(incompatibilities={"iris": ["optifine"]})
        records = _records("iris-1.6.jar", "optifine-hd.jar")
        conflicts = IncompatibilityDetector().detect(records, _context(catalog=catalog))
        assert len(conflicts) == 1
        assert conflicts[0].primary == "iris-1.6"
        assert conflicts[0].secondary == "optifine-hd"
        assert conflicts[0].message == "Incompatibility detected between iris-1.6 and optifine-hd"

    def test_custom_catalog_key_pairs_with_sodium(self):
        catalog = RuleCatalog.from_mapping(incompatibilities={"lithium": ["sodium"]})
        records = _records("lithium-0.11.jar", "sodium-0.5.jar")
        conflicts = IncompatibilityDetector().detect(records, _context(catalog=catalog))
        assert len(conflicts) >= 1

    def test_no_rule_no_conflict(self, empty_catalog):
        records = _records("optifine-1.20.1.jar", "sodium-1.20.1.jar")
        assert IncompatibilityDetector().detect(records, _context(catalog=empty_catalog)) == []


# ---------------------------------------------------------------------------
# MissingDependencyDetector
# ---------------------------------------------------------------------------


class TestMissingDependencyDetector:
    def test_missing_flywheel(self):
        conflicts = MissingDependencyDetector().detect(_records("create-1.20.1.jar"), _context())
        assert len(conflicts) == 1
        assert conflicts[0].kind == ConflictKind.missing_dependency
        assert conflicts[0].severity == Severity.warning
        assert conflicts[0].primary == "create-1.20.1"
        assert conflicts[0].secondary is None
        assert conflicts[0].message == "Missing dependency: flywheel"

    def test_present_dependency(self):
        records = _records("create-1.20.1.jar", "flywheel-1.20.1.jar")
        assert MissingDependencyDetector().detect(records, _context()) == []

    def test_one_finding_per_missing_id(self):
        conflicts = MissingDependencyDetector().detect(_records("jei-1.20.1.jar"), _context())
        assert [c.message for c in conflicts] == [
            "Missing dependency: forge",
            "Missing dependency: neoforge",
        ]

    def test_partially_satisfied(self):
        records = _records("jei-1.20.1.jar", "forge-1.20.1-47.2.0.jar")
        conflicts = MissingDependencyDetector().detect(records, _context())
        assert [c.message for c in conflicts] == ["Missing dependency: neoforge"]


# ---------------------------------------------------------------------------
# VersionMismatchDetector
# ---------------------------------------------------------------------------


class TestVersionMismatchDetector:
    def test_older_game_version(self):
        records = _records("create-1.19.2.jar", "flywheel-1.20.1.jar")
        conflicts = VersionMismatchDetector().detect(records, _context("1.20.1"))
        assert len(conflicts) == 1
        assert conflicts[0].primary == "create-1.19.2"
        assert conflicts[0].severity == Severity.warning
        assert "1.19.2" in conflicts[0].message

    def test_patch_difference_is_compatible(self):
        records = _records("create-1.20.4.jar")
        assert VersionMismatchDetector().detect(records, _context("1.20.1")) == []

    def test_no_game_version_on_record(self):
        assert VersionMismatchDetector().detect(_records("appleskin.jar"), _context()) == []

    def test_empty_server_version_skips_check(self):
        records = _records("create-1.19.2.jar")
        assert VersionMismatchDetector().detect(records, _context("")) == []


# ---------------------------------------------------------------------------
# LoaderMismatchDetector
# ---------------------------------------------------------------------------


class TestLoaderMismatchDetector:
    def test_neoforge_record_on_forge_server(self):
        record = ModRecord(file_name="x.jar", name="x", mod_id="x", loader=Loader.neoforge)
        conflicts = LoaderMismatchDetector().detect([record], _context(loader="forge"))
        assert len(conflicts) == 1
        assert conflicts[0].kind == ConflictKind.loader_incompatible
        assert conflicts[0].severity == Severity.error

    def test_unknown_loader_never_reported(self):
        record = ModRecord(file_name="x.jar", name="x", mod_id="x", loader=Loader.unknown)
        for server_loader in ("forge", "fabric", "quilt", ""):
            assert LoaderMismatchDetector().detect([record], _context(loader=server_loader)) == []

    def test_matching_loader(self):
        records = _records("sodium-fabric-0.5.3.jar")
        assert LoaderMismatchDetector().detect(records, _context(loader="fabric")) == []

    def test_server_loader_case_insensitive(self):
        records = _records("mekanism-forge-10.4.jar")
        assert LoaderMismatchDetector().detect(records, _context(loader="Forge")) == []

    def test_fabric_jar_on_forge_server(self):
        records = _records("sodium-fabric-0.5.3.jar")
        conflicts = LoaderMismatchDetector().detect(records, _context(loader="forge"))
        assert len(conflicts) == 1
        assert "fabric" in conflicts[0].message
