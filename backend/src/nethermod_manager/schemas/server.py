from datetime import datetime

from pydantic import BaseModel

from nethermod_manager.models.analysis import Loader


class ServerCreate(BaseModel):
    name: str
    install_path: str
    game_version: str = ""
    loader: Loader = Loader.forge


class ServerOut(BaseModel):
    id: int
    name: str
    install_path: str
    game_version: str
    loader: Loader
    created_at: datetime
    updated_at: datetime


class ModFileEntry(BaseModel):
    name: str
    size: int
    enabled: bool


class ModToggleRequest(BaseModel):
    file_name: str
    enabled: bool


class ModToggleResult(BaseModel):
    old_name: str
    new_name: str
    enabled: bool
