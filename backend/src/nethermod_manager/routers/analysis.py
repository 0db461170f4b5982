"""Endpoints for mod compatibility analysis and the rule catalog."""

from fastapi import APIRouter, Depends
from sqlmodel import Session

from nethermod_manager.database import get_session
from nethermod_manager.routers.deps import get_server_or_404
from nethermod_manager.schemas.analysis import (
    AnalysisRequest,
    AnalysisResult,
    ConflictIn,
    RuleCatalogOut,
    SuggestionsOut,
)
from nethermod_manager.services.analysis_service import analyze_server
from nethermod_manager.services.conflicts import analyze_mods, get_rule_catalog, suggestions_for

router = APIRouter(tags=["analysis"])


@router.get("/servers/{server_name}/analysis", response_model=AnalysisResult)
def analyze_server_mods(
    server_name: str,
    include_disabled: bool = True,
    session: Session = Depends(get_session),
) -> AnalysisResult:
    """Analyze the mods currently installed on a server."""
    server = get_server_or_404(server_name, session)
    return analyze_server(server, include_disabled=include_disabled)


@router.post("/analysis", response_model=AnalysisResult)
def analyze_snapshot(data: AnalysisRequest) -> AnalysisResult:
    """Analyze an explicit list of filenames against a given server target."""
    analysis = analyze_mods(data.file_names, data.server_game_version, data.server_loader)
    return AnalysisResult.from_analysis(
        analysis,
        data.server_game_version,
        data.server_loader,
    )


@router.post("/analysis/suggestions", response_model=SuggestionsOut)
def conflict_suggestions(data: ConflictIn) -> SuggestionsOut:
    """Return remediation hints for a single finding."""
    return SuggestionsOut(suggestions=suggestions_for(data.to_conflict()))


@router.get("/catalog", response_model=RuleCatalogOut)
def rule_catalog() -> RuleCatalogOut:
    """Return the rule catalog currently used by the analysis engine."""
    catalog = get_rule_catalog()
    return RuleCatalogOut(
        incompatibilities={k: list(v) for k, v in catalog.incompatibilities.items()},
        dependencies={k: list(v) for k, v in catalog.dependencies.items()},
    )
