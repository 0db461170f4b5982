"""Shared FastAPI dependencies used across routers."""

from fastapi import HTTPException
from sqlmodel import Session, select

from nethermod_manager.models.server import Server


def get_server_or_404(server_name: str, session: Session) -> Server:
    """Look up a server by name, raising 404 if not found."""
    server = session.exec(select(Server).where(Server.name == server_name)).first()
    if not server:
        raise HTTPException(404, f"Server '{server_name}' not found")
    return server
