from datetime import datetime

from pydantic import BaseModel

from nethermod_manager.models.analysis import Loader


class ProfileCreate(BaseModel):
    name: str
    description: str = ""
    icon: str = ""
    mods: list[str] = []
    server_loader: Loader = Loader.forge
    game_version: str = ""
    tags: list[str] = []


class ProfileUpdate(BaseModel):
    name: str | None = None
    description: str | None = None
    icon: str | None = None
    mods: list[str] | None = None
    server_loader: Loader | None = None
    game_version: str | None = None
    tags: list[str] | None = None


class ProfileOut(BaseModel):
    id: int
    server_id: int
    name: str
    description: str = ""
    icon: str = ""
    mods: list[str] = []
    server_loader: Loader
    game_version: str = ""
    tags: list[str] = []
    created_at: datetime
    updated_at: datetime


# --- Apply ---


class ProfileApplyResult(BaseModel):
    profile: ProfileOut
    disabled: list[str] = []
    enabled: list[str] = []
    skipped_mods: list[str] = []
    skipped_count: int = 0


# --- Export / Import ---


class ProfileExport(BaseModel):
    type: str = "nethermod_profile"
    version: str = "1.0"
    name: str
    description: str = ""
    icon: str = ""
    mods: list[str] = []
    server_loader: Loader = Loader.forge
    game_version: str = ""
    tags: list[str] = []
    exported_at: datetime | None = None
