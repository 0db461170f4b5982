"""Infer mod metadata from a mod jar filename.

Server mod folders rarely follow a strict naming scheme, but most releases
look roughly like ``{modid}-{loader}-{game_version}-{mod_version}.jar``:
  create-1.20.1-0.5.1.f.jar
  sodium-fabric-mc1.20.1-0.5.3.jar
  jei_1.16.5-7.7.1.jar.disabled

Nothing here reads the jar itself, so every field is a best guess.
"""

import re

from nethermod_manager.models.analysis import Loader, ModRecord

JAR_EXTENSION = ".jar"
DISABLED_MARKER = ".disabled"

# Checked in order, first hit wins. The legacy 1.12 / 1.16 game versions only
# ever shipped Forge builds on the servers this targets. "neoforge" contains
# "forge", so the Forge entry always claims NeoForge jars first.
_LOADER_TOKENS: tuple[tuple[Loader, tuple[str, ...]], ...] = (
    (Loader.forge, ("forge", "1.12", "1.16")),
    (Loader.neoforge, ("neoforge",)),
    (Loader.fabric, ("fabric",)),
    (Loader.quilt, ("quilt",)),
)

_GAME_VERSION_RE = re.compile(r"(\d+\.\d+(?:\.\d+)?)")
_MOD_ID_SPLIT_RE = re.compile(r"[-_]")


def strip_markers(file_name: str) -> str:
    """Drop the first ``.jar`` and the first ``.disabled`` occurrence.

    >>> strip_markers("Create-1.20.1.jar.disabled")
    'Create-1.20.1'
    """
    return file_name.replace(JAR_EXTENSION, "", 1).replace(DISABLED_MARKER, "", 1)


def detect_loader(normalized: str) -> Loader:
    for loader, tokens in _LOADER_TOKENS:
        if any(token in normalized for token in tokens):
            return loader
    return Loader.unknown


def parse_mod_filename(file_name: str) -> ModRecord:
    """Build a :class:`ModRecord` from a raw filename. Never raises.

    Inputs without separators or digits still produce a record; the unknown
    fields are left at their defaults.
    """
    normalized = strip_markers(file_name.lower())

    match = _GAME_VERSION_RE.search(normalized)
    game_version = match.group(1) if match else None

    return ModRecord(
        file_name=file_name,
        name=strip_markers(file_name),
        mod_id=_MOD_ID_SPLIT_RE.split(normalized, maxsplit=1)[0],
        loader=detect_loader(normalized),
        game_version=game_version,
    )


def major_minor(version: str) -> str:
    """Return the first two dot-separated components of a version string.

    >>> major_minor("1.20.1")
    '1.20'
    >>> major_minor("1")
    '1'
    """
    return ".".join(version.split(".")[:2])
