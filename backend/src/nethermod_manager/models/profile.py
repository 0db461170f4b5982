"""Persisted mod profiles: named sets of mod files to enable together."""

from datetime import UTC, datetime
from typing import TYPE_CHECKING, Optional

from sqlmodel import Column, Field, Relationship, SQLModel, Text

from nethermod_manager.models.analysis import Loader

if TYPE_CHECKING:
    from nethermod_manager.models.server import Server


class ModProfile(SQLModel, table=True):
    __tablename__ = "mod_profiles"

    id: int | None = Field(default=None, primary_key=True)
    server_id: int = Field(foreign_key="servers.id", index=True)
    name: str = Field(index=True)
    description: str = ""
    icon: str = ""
    server_loader: Loader = Loader.forge
    game_version: str = ""
    tags: str = Field(default="[]", sa_column=Column(Text))
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    server: Optional["Server"] = Relationship(back_populates="profiles")
    entries: list["ModProfileEntry"] = Relationship(
        back_populates="profile",
        cascade_delete=True,
    )


class ModProfileEntry(SQLModel, table=True):
    __tablename__ = "mod_profile_entries"

    id: int | None = Field(default=None, primary_key=True)
    profile_id: int = Field(foreign_key="mod_profiles.id", index=True)
    file_name: str
    position: int = 0

    profile: Optional["ModProfile"] = Relationship(back_populates="entries")
