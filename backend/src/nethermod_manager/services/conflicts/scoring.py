"""Turn a conflict list into a 0-100 health score."""

from collections.abc import Sequence

from nethermod_manager.models.analysis import Conflict, HealthReport, HealthStatus, Severity

ERROR_PENALTY = 20
WARNING_PENALTY = 5

# (minimum score, status), highest first
_STATUS_THRESHOLDS: tuple[tuple[int, HealthStatus], ...] = (
    (90, HealthStatus.excellent),
    (70, HealthStatus.good),
    (40, HealthStatus.warning),
)


def health_status(score: int) -> HealthStatus:
    for minimum, status in _STATUS_THRESHOLDS:
        if score >= minimum:
            return status
    return HealthStatus.critical


def score_conflicts(conflicts: Sequence[Conflict], total_mods: int) -> HealthReport:
    """Count findings by severity and derive score and status.

    Info findings are counted but carry no penalty.
    """
    errors = sum(1 for c in conflicts if c.severity is Severity.error)
    warnings = sum(1 for c in conflicts if c.severity is Severity.warning)
    infos = sum(1 for c in conflicts if c.severity is Severity.info)

    raw = 100 - errors * ERROR_PENALTY - warnings * WARNING_PENALTY
    score = max(0, min(100, raw))

    return HealthReport(
        total_mods=total_mods,
        error_count=errors,
        warning_count=warnings,
        info_count=infos,
        score=score,
        status=health_status(score),
    )
