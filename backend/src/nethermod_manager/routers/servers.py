"""Endpoints for the server registry and its mods folder."""

from datetime import UTC, datetime

from fastapi import APIRouter, Depends, HTTPException, Response
from sqlmodel import Session, select

from nethermod_manager.database import get_session
from nethermod_manager.models.server import Server
from nethermod_manager.routers.deps import get_server_or_404
from nethermod_manager.schemas.server import (
    ModFileEntry,
    ModToggleRequest,
    ModToggleResult,
    ServerCreate,
    ServerOut,
)
from nethermod_manager.services.mod_folder import list_server_mods, toggle_mod

router = APIRouter(prefix="/servers", tags=["servers"])


@router.get("/", response_model=list[ServerOut])
def list_servers(session: Session = Depends(get_session)) -> list[Server]:
    return list(session.exec(select(Server)).all())


@router.post("/", response_model=ServerOut, status_code=201)
def create_server(
    data: ServerCreate, response: Response, session: Session = Depends(get_session)
) -> Server:
    existing = session.exec(select(Server).where(Server.name == data.name)).first()
    if existing:
        existing.install_path = data.install_path
        existing.game_version = data.game_version
        existing.loader = data.loader
        existing.updated_at = datetime.now(UTC)
        session.commit()
        session.refresh(existing)
        response.status_code = 200
        return existing

    server = Server(
        name=data.name,
        install_path=data.install_path,
        game_version=data.game_version,
        loader=data.loader,
    )
    session.add(server)
    session.commit()
    session.refresh(server)
    return server


@router.get("/{server_name}", response_model=ServerOut)
def get_server(server_name: str, session: Session = Depends(get_session)) -> Server:
    return get_server_or_404(server_name, session)


@router.delete("/{server_name}", status_code=204)
def delete_server(server_name: str, session: Session = Depends(get_session)) -> None:
    server = get_server_or_404(server_name, session)
    session.delete(server)
    session.commit()


@router.get("/{server_name}/mods", response_model=list[ModFileEntry])
def list_mods(server_name: str, session: Session = Depends(get_session)) -> list[ModFileEntry]:
    """List the files in the server's mods folder."""
    server = get_server_or_404(server_name, session)
    return list_server_mods(server.install_path)


@router.post("/{server_name}/mods/toggle", response_model=ModToggleResult)
def toggle_server_mod(
    server_name: str,
    data: ModToggleRequest,
    session: Session = Depends(get_session),
) -> ModToggleResult:
    """Enable or disable one mod file by renaming it."""
    server = get_server_or_404(server_name, session)
    try:
        return toggle_mod(server.install_path, data.file_name, data.enabled)
    except FileNotFoundError as exc:
        raise HTTPException(404, str(exc)) from exc
    except ValueError as exc:
        raise HTTPException(400, str(exc)) from exc
