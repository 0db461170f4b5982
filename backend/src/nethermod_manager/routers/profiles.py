"""Endpoints for mod profile management: save, apply, export, import."""

from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session

from nethermod_manager.database import get_session
from nethermod_manager.models.profile import ModProfile
from nethermod_manager.models.server import Server
from nethermod_manager.routers.deps import get_server_or_404
from nethermod_manager.schemas.analysis import AnalysisResult
from nethermod_manager.schemas.profile import (
    ProfileApplyResult,
    ProfileCreate,
    ProfileExport,
    ProfileOut,
    ProfileUpdate,
)
from nethermod_manager.services.analysis_service import analyze_profile
from nethermod_manager.services.profile_service import (
    apply_profile,
    create_profile,
    delete_profile,
    duplicate_profile,
    export_profile,
    import_profile,
    list_profiles,
    profile_to_out,
    update_profile,
)

router = APIRouter(prefix="/servers/{server_name}/profiles", tags=["profiles"])


def _get_profile(profile_id: int, server: Server, session: Session) -> ModProfile:
    profile = session.get(ModProfile, profile_id)
    if not profile or profile.server_id != server.id:
        raise HTTPException(404, "Profile not found")
    return profile


@router.get("/", response_model=list[ProfileOut])
def list_server_profiles(
    server_name: str,
    session: Session = Depends(get_session),
) -> list[ProfileOut]:
    """List all saved profiles for a server."""
    server = get_server_or_404(server_name, session)
    return list_profiles(server, session)


@router.post("/", response_model=ProfileOut, status_code=201)
def save_profile(
    server_name: str,
    data: ProfileCreate,
    session: Session = Depends(get_session),
) -> ProfileOut:
    server = get_server_or_404(server_name, session)
    return create_profile(server, data, session)


# Register /import BEFORE /{profile_id} to avoid path conflict
@router.post("/import", response_model=ProfileOut, status_code=201)
def import_server_profile(
    server_name: str,
    data: ProfileExport,
    session: Session = Depends(get_session),
) -> ProfileOut:
    """Import a profile from an exported JSON object."""
    server = get_server_or_404(server_name, session)
    try:
        return import_profile(server, data, session)
    except ValueError as exc:
        raise HTTPException(400, str(exc)) from exc


@router.get("/{profile_id}", response_model=ProfileOut)
def get_profile(
    server_name: str,
    profile_id: int,
    session: Session = Depends(get_session),
) -> ProfileOut:
    server = get_server_or_404(server_name, session)
    return profile_to_out(_get_profile(profile_id, server, session))


@router.patch("/{profile_id}", response_model=ProfileOut)
def edit_profile(
    server_name: str,
    profile_id: int,
    data: ProfileUpdate,
    session: Session = Depends(get_session),
) -> ProfileOut:
    server = get_server_or_404(server_name, session)
    profile = _get_profile(profile_id, server, session)
    return update_profile(profile, data, session)


@router.delete("/{profile_id}", status_code=204)
def remove_profile(
    server_name: str,
    profile_id: int,
    session: Session = Depends(get_session),
) -> None:
    server = get_server_or_404(server_name, session)
    delete_profile(_get_profile(profile_id, server, session), session)


@router.post("/{profile_id}/duplicate", response_model=ProfileOut, status_code=201)
def duplicate_server_profile(
    server_name: str,
    profile_id: int,
    session: Session = Depends(get_session),
) -> ProfileOut:
    server = get_server_or_404(server_name, session)
    return duplicate_profile(_get_profile(profile_id, server, session), session)


@router.post("/{profile_id}/apply", response_model=ProfileApplyResult)
def apply_server_profile(
    server_name: str,
    profile_id: int,
    session: Session = Depends(get_session),
) -> ProfileApplyResult:
    """Enable exactly the profile's mods on the server, disabling the rest."""
    server = get_server_or_404(server_name, session)
    return apply_profile(_get_profile(profile_id, server, session), server)


@router.get("/{profile_id}/analysis", response_model=AnalysisResult)
def analyze_server_profile(
    server_name: str,
    profile_id: int,
    session: Session = Depends(get_session),
) -> AnalysisResult:
    """Analyze a profile's mod list before applying it."""
    server = get_server_or_404(server_name, session)
    return analyze_profile(_get_profile(profile_id, server, session))


@router.post("/{profile_id}/export", response_model=ProfileExport)
def export_server_profile(
    server_name: str,
    profile_id: int,
    session: Session = Depends(get_session),
) -> ProfileExport:
    """Export a profile as a shareable JSON object."""
    server = get_server_or_404(server_name, session)
    return export_profile(_get_profile(profile_id, server, session))
