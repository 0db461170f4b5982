"""List and enable/disable the jar files in a server's ``mods`` folder.

A mod is disabled by appending ``.disabled`` to its filename, the convention
the server launcher already ignores when loading jars.
"""

import logging
from pathlib import Path

from nethermod_manager.matching.mod_filename import DISABLED_MARKER
from nethermod_manager.schemas.server import ModFileEntry, ModToggleResult

logger = logging.getLogger(__name__)

MODS_DIR_NAME = "mods"


def mods_dir(install_path: str) -> Path:
    return Path(install_path) / MODS_DIR_NAME


def list_server_mods(install_path: str) -> list[ModFileEntry]:
    """Return every file in the server's mods folder, sorted by name.

    The folder is created when it does not exist yet.
    """
    folder = mods_dir(install_path)
    if not folder.exists():
        folder.mkdir(parents=True, exist_ok=True)
        logger.info("Created mods folder %s", folder)
        return []

    entries: list[ModFileEntry] = []
    for path in sorted(folder.iterdir(), key=lambda p: p.name):
        if not path.is_file():
            continue
        entries.append(
            ModFileEntry(
                name=path.name,
                size=path.stat().st_size,
                enabled=not path.name.endswith(DISABLED_MARKER),
            )
        )
    return entries


def enabled_name(file_name: str) -> str:
    return file_name.removesuffix(DISABLED_MARKER)


def disabled_name(file_name: str) -> str:
    if file_name.endswith(DISABLED_MARKER):
        return file_name
    return file_name + DISABLED_MARKER


def toggle_mod(install_path: str, file_name: str, enabled: bool) -> ModToggleResult:
    """Rename *file_name* so that it is enabled or disabled.

    Raises ``ValueError`` if *file_name* points outside the mods folder and
    ``FileNotFoundError`` if the file is not in it.
    """
    folder = mods_dir(install_path)
    old_path = folder / file_name
    if Path(file_name).name != file_name or file_name == "..":
        raise ValueError(f"Invalid mod filename: {file_name}")
    if not old_path.is_file():
        raise FileNotFoundError(f"Mod not found: {file_name}")

    new_name = enabled_name(file_name) if enabled else disabled_name(file_name)
    if new_name != file_name:
        old_path.rename(folder / new_name)
        logger.info("%s '%s'", "Enabled" if enabled else "Disabled", new_name)

    return ModToggleResult(old_name=file_name, new_name=new_name, enabled=enabled)
