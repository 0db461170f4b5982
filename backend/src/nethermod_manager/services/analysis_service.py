"""Run the compatibility engine against a registered server or profile."""

import logging

from nethermod_manager.models.profile import ModProfile
from nethermod_manager.models.server import Server
from nethermod_manager.schemas.analysis import AnalysisResult
from nethermod_manager.services.conflicts import analyze_mods
from nethermod_manager.services.mod_folder import list_server_mods

logger = logging.getLogger(__name__)


def analyze_server(server: Server, *, include_disabled: bool = True) -> AnalysisResult:
    """Analyze the jars currently in the server's mods folder."""
    files = list_server_mods(server.install_path)
    if not include_disabled:
        files = [f for f in files if f.enabled]

    analysis = analyze_mods(
        [f.name for f in files],
        server.game_version,
        str(server.loader),
    )
    logger.info(
        "Analyzed %d mods for %s: %d conflicts, score %d (%s)",
        analysis.report.total_mods,
        server.name,
        len(analysis.conflicts),
        analysis.report.score,
        analysis.report.status,
    )
    return AnalysisResult.from_analysis(
        analysis,
        server.game_version,
        str(server.loader),
        server_name=server.name,
        files=files,
    )


def analyze_profile(profile: ModProfile) -> AnalysisResult:
    """Analyze a profile's file list against the profile's own target."""
    entries = sorted(profile.entries, key=lambda e: e.position)
    analysis = analyze_mods(
        [e.file_name for e in entries],
        profile.game_version,
        str(profile.server_loader),
    )
    logger.info(
        "Analyzed profile '%s': %d conflicts, score %d",
        profile.name,
        len(analysis.conflicts),
        analysis.report.score,
    )
    return AnalysisResult.from_analysis(
        analysis,
        profile.game_version,
        str(profile.server_loader),
    )
