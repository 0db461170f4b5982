from nethermod_manager.models.profile import ModProfile, ModProfileEntry
from nethermod_manager.models.server import Server

__all__ = [
    "ModProfile",
    "ModProfileEntry",
    "Server",
]
