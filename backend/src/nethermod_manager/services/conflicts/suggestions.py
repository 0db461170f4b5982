"""Generic remediation hints per conflict kind."""

from nethermod_manager.models.analysis import Conflict, ConflictKind

_GENERIC_SUGGESTIONS: dict[ConflictKind, tuple[str, ...]] = {
    ConflictKind.duplicate: (
        "Keep only the newest version",
        "Remove the older versions to avoid load conflicts",
    ),
    ConflictKind.incompatibility: (
        "Disable {primary} or {secondary}",
        "Check both mods' documentation for compatibility notes",
    ),
    ConflictKind.missing_dependency: (
        "Install the missing dependency",
        "Check the mod's page for its required dependencies",
    ),
    ConflictKind.version_mismatch: (
        "Download a build matching the server's game version",
        "Update the server to the game version the mod targets",
    ),
    ConflictKind.loader_incompatible: (
        "Find a build for the server's loader family",
        "Switch the server type if needed",
    ),
}

_NO_SECONDARY_HINT = "Disable one of the two mods"


def suggestions_for(conflict: Conflict) -> list[str]:
    """Return hints for *conflict*, its own default suggestion first."""
    templates = _GENERIC_SUGGESTIONS[conflict.kind]
    if conflict.kind is ConflictKind.incompatibility and conflict.secondary is None:
        templates = (_NO_SECONDARY_HINT, *templates[1:])
    suggestions = [
        template.format(primary=conflict.primary, secondary=conflict.secondary)
        for template in templates
    ]
    if conflict.suggestion:
        suggestions.insert(0, conflict.suggestion)
    return suggestions
