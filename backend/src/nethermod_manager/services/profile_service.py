"""Mod profile management: save, update, duplicate, export, import and apply.

A profile is a named list of mod filenames meant to be enabled together on
one server, along with the game version and loader it was assembled for.
Applying a profile disables every enabled jar in the server's mods folder and
then enables exactly the profile's files.
"""

from __future__ import annotations

import json
import logging
from datetime import UTC, datetime

from sqlmodel import Session, select

from nethermod_manager.models.profile import ModProfile, ModProfileEntry
from nethermod_manager.models.server import Server
from nethermod_manager.schemas.profile import (
    ProfileApplyResult,
    ProfileCreate,
    ProfileExport,
    ProfileOut,
    ProfileUpdate,
)
from nethermod_manager.services.mod_folder import (
    disabled_name,
    enabled_name,
    list_server_mods,
    toggle_mod,
)

logger = logging.getLogger(__name__)

COPY_SUFFIX = " (Copy)"


def _profile_mods(profile: ModProfile) -> list[str]:
    return [e.file_name for e in sorted(profile.entries, key=lambda e: e.position)]


def _replace_entries(profile: ModProfile, mods: list[str], session: Session) -> None:
    for entry in list(profile.entries):
        session.delete(entry)
    session.flush()
    for position, file_name in enumerate(mods):
        session.add(
            ModProfileEntry(
                profile_id=profile.id,  # type: ignore[arg-type]
                file_name=file_name,
                position=position,
            )
        )


def profile_to_out(profile: ModProfile) -> ProfileOut:
    """Convert a ModProfile model to a ProfileOut schema."""
    _ = profile.entries
    return ProfileOut(
        id=profile.id,  # type: ignore[arg-type]
        server_id=profile.server_id,
        name=profile.name,
        description=profile.description,
        icon=profile.icon,
        mods=_profile_mods(profile),
        server_loader=profile.server_loader,
        game_version=profile.game_version,
        tags=json.loads(profile.tags or "[]"),
        created_at=profile.created_at,
        updated_at=profile.updated_at,
    )


def list_profiles(server: Server, session: Session) -> list[ProfileOut]:
    """Return all profiles saved for a server."""
    profiles = session.exec(select(ModProfile).where(ModProfile.server_id == server.id)).all()
    return [profile_to_out(p) for p in profiles]


def create_profile(server: Server, data: ProfileCreate, session: Session) -> ProfileOut:
    profile = ModProfile(
        server_id=server.id,  # type: ignore[arg-type]
        name=data.name,
        description=data.description,
        icon=data.icon,
        server_loader=data.server_loader,
        game_version=data.game_version,
        tags=json.dumps(data.tags),
    )
    session.add(profile)
    session.flush()
    _replace_entries(profile, data.mods, session)
    session.commit()
    session.refresh(profile)

    logger.info("Saved profile '%s' with %d mods for %s", profile.name, len(data.mods), server.name)
    return profile_to_out(profile)


def update_profile(profile: ModProfile, data: ProfileUpdate, session: Session) -> ProfileOut:
    """Apply the fields set on *data*; unset fields keep their value."""
    updates = data.model_dump(exclude_unset=True)
    mods = updates.pop("mods", None)
    tags = updates.pop("tags", None)

    for field_name, value in updates.items():
        if value is not None:
            setattr(profile, field_name, value)
    if tags is not None:
        profile.tags = json.dumps(tags)
    if mods is not None:
        _replace_entries(profile, mods, session)

    profile.updated_at = datetime.now(UTC)
    session.add(profile)
    session.commit()
    session.refresh(profile)
    return profile_to_out(profile)


def delete_profile(profile: ModProfile, session: Session) -> None:
    session.delete(profile)
    session.commit()


def duplicate_profile(profile: ModProfile, session: Session) -> ProfileOut:
    """Copy a profile under ``<name> (Copy)`` with fresh timestamps."""
    copy = ModProfile(
        server_id=profile.server_id,
        name=profile.name + COPY_SUFFIX,
        description=profile.description,
        icon=profile.icon,
        server_loader=profile.server_loader,
        game_version=profile.game_version,
        tags=profile.tags,
    )
    session.add(copy)
    session.flush()
    _replace_entries(copy, _profile_mods(profile), session)
    session.commit()
    session.refresh(copy)
    return profile_to_out(copy)


def export_profile(profile: ModProfile) -> ProfileExport:
    """Build a portable JSON-serialisable copy of a profile."""
    return ProfileExport(
        name=profile.name,
        description=profile.description,
        icon=profile.icon,
        mods=_profile_mods(profile),
        server_loader=profile.server_loader,
        game_version=profile.game_version,
        tags=json.loads(profile.tags or "[]"),
        exported_at=datetime.now(UTC),
    )


def import_profile(server: Server, data: ProfileExport, session: Session) -> ProfileOut:
    """Store an exported profile under *server* with a new id and timestamps."""
    if data.type != "nethermod_profile":
        raise ValueError(f"Unsupported profile export type: {data.type!r}")
    return create_profile(
        server,
        ProfileCreate(
            name=data.name,
            description=data.description,
            icon=data.icon,
            mods=data.mods,
            server_loader=data.server_loader,
            game_version=data.game_version,
            tags=data.tags,
        ),
        session,
    )


def apply_profile(profile: ModProfile, server: Server) -> ProfileApplyResult:
    """Disable every enabled mod on *server*, then enable the profile's files.

    Profile files that are not on disk, or that fail to rename, are reported
    in ``skipped_mods`` rather than aborting the apply.
    """
    disabled: list[str] = []
    for entry in list_server_mods(server.install_path):
        if not entry.enabled:
            continue
        try:
            toggle_mod(server.install_path, entry.name, enabled=False)
        except OSError:
            logger.warning("Could not disable %s", entry.name, exc_info=True)
            continue
        disabled.append(entry.name)

    on_disk = {entry.name for entry in list_server_mods(server.install_path)}
    enabled: list[str] = []
    skipped: list[str] = []
    for file_name in dict.fromkeys(_profile_mods(profile)):
        target = disabled_name(enabled_name(file_name))
        if enabled_name(file_name) in enabled:
            continue
        if target not in on_disk:
            skipped.append(file_name)
            continue
        try:
            result = toggle_mod(server.install_path, target, enabled=True)
        except OSError:
            logger.warning("Could not enable %s", target, exc_info=True)
            skipped.append(file_name)
            continue
        enabled.append(result.new_name)

    logger.info(
        "Applied profile '%s' to %s: %d enabled, %d skipped",
        profile.name,
        server.name,
        len(enabled),
        len(skipped),
    )
    return ProfileApplyResult(
        profile=profile_to_out(profile),
        disabled=disabled,
        enabled=enabled,
        skipped_mods=skipped,
        skipped_count=len(skipped),
    )
