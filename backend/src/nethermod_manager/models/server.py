from datetime import UTC, datetime
from typing import TYPE_CHECKING

from sqlmodel import Field, Relationship, SQLModel

from nethermod_manager.models.analysis import Loader

if TYPE_CHECKING:
    from nethermod_manager.models.profile import ModProfile


class Server(SQLModel, table=True):
    __tablename__ = "servers"

    id: int | None = Field(default=None, primary_key=True)
    name: str = Field(index=True, unique=True)
    install_path: str
    game_version: str = ""
    loader: Loader = Loader.forge
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    profiles: list["ModProfile"] = Relationship(back_populates="server", cascade_delete=True)
