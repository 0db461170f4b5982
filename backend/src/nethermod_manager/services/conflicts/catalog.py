"""Known incompatibility and dependency rules, keyed by inferred mod id.

A :class:`RuleCatalog` is immutable once built. The process-wide active
catalog is held by reference and only ever replaced as a whole via
:func:`set_rule_catalog`, so a detection run never sees a half-updated table.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType

from pydantic import BaseModel

logger = logging.getLogger(__name__)


def _freeze(table: Mapping[str, Iterable[str]]) -> Mapping[str, tuple[str, ...]]:
    frozen: dict[str, tuple[str, ...]] = {}
    for key, values in table.items():
        frozen[key.strip().lower()] = tuple(v.strip().lower() for v in values)
    return MappingProxyType(frozen)


@dataclass(frozen=True, slots=True, eq=False)
class RuleCatalog:
    """Directional rule table.

    ``incompatibilities[a]`` lists the ids that break when installed next to
    ``a``; ``dependencies[a]`` lists the ids ``a`` needs to load.
    """

    incompatibilities: Mapping[str, tuple[str, ...]] = field(
        default_factory=lambda: MappingProxyType({})
    )
    dependencies: Mapping[str, tuple[str, ...]] = field(
        default_factory=lambda: MappingProxyType({})
    )

    @classmethod
    def from_mapping(
        cls,
        incompatibilities: Mapping[str, Iterable[str]] | None = None,
        dependencies: Mapping[str, Iterable[str]] | None = None,
    ) -> RuleCatalog:
        return cls(
            incompatibilities=_freeze(incompatibilities or {}),
            dependencies=_freeze(dependencies or {}),
        )

    def incompatible_with(self, mod_id: str) -> tuple[str, ...]:
        return self.incompatibilities.get(mod_id, ())

    def requires(self, mod_id: str) -> tuple[str, ...]:
        return self.dependencies.get(mod_id, ())


class RuleCatalogFile(BaseModel):
    """On-disk JSON layout accepted by :func:`load_rule_catalog`."""

    incompatibilities: dict[str, list[str]] = {}
    dependencies: dict[str, list[str]] = {}


DEFAULT_RULE_CATALOG = RuleCatalog.from_mapping(
    incompatibilities={
        "optifine": ["sodium", "rubidium", "embeddium"],
        "sodium": ["optifine", "magnesium"],
        "rubidium": ["optifine", "sodium"],
        "embeddium": ["optifine", "sodium"],
        "iris": ["optifine"],
        "oculus": ["optifine", "iris"],
        # Known to clash in some releases
        "create": ["botania"],
    },
    dependencies={
        "jei": ["forge", "neoforge"],
        "rei": ["fabric"],
        "create": ["flywheel"],
        "botania": ["patchouli"],
        "thermal-expansion": ["cofh-core"],
        "mekanism": ["mekanism-generators"],
        "ae2": ["appliedenergistics2"],
        "refined-storage": ["refinedstorage"],
    },
)

_active_catalog: RuleCatalog = DEFAULT_RULE_CATALOG


def get_rule_catalog() -> RuleCatalog:
    """Return the catalog detection runs use when none is passed in."""
    return _active_catalog


def set_rule_catalog(catalog: RuleCatalog) -> None:
    """Swap the active catalog for a new one."""
    global _active_catalog
    _active_catalog = catalog
    logger.info(
        "Rule catalog swapped: %d incompatibility rules, %d dependency rules",
        len(catalog.incompatibilities),
        len(catalog.dependencies),
    )


def load_rule_catalog(path: Path) -> RuleCatalog:
    """Read a catalog from a JSON file.

    Raises ``OSError`` if the file cannot be read and
    ``pydantic.ValidationError`` if its content does not match
    :class:`RuleCatalogFile`.
    """
    raw = path.read_text(encoding="utf-8")
    data = RuleCatalogFile.model_validate_json(raw)
    return RuleCatalog.from_mapping(data.incompatibilities, data.dependencies)
