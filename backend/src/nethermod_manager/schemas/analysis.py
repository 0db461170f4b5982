"""Request/response models for the mod compatibility analysis endpoints."""

from __future__ import annotations

from pydantic import BaseModel

from nethermod_manager.models.analysis import (
    Conflict,
    ConflictKind,
    HealthStatus,
    Loader,
    ModAnalysis,
    ModRecord,
    Severity,
)
from nethermod_manager.schemas.server import ModFileEntry
from nethermod_manager.services.conflicts import suggestions_for


class ModRecordOut(BaseModel):
    file_name: str
    name: str
    mod_id: str
    version: str | None = None
    game_version: str | None = None
    loader: Loader

    @classmethod
    def from_record(cls, record: ModRecord) -> ModRecordOut:
        return cls(
            file_name=record.file_name,
            name=record.name,
            mod_id=record.mod_id,
            version=record.version,
            game_version=record.game_version,
            loader=record.loader,
        )


class ConflictIn(BaseModel):
    kind: ConflictKind
    severity: Severity
    primary: str
    secondary: str | None = None
    message: str = ""
    suggestion: str | None = None

    def to_conflict(self) -> Conflict:
        return Conflict(
            kind=self.kind,
            severity=self.severity,
            primary=self.primary,
            secondary=self.secondary,
            message=self.message,
            suggestion=self.suggestion,
        )


class ConflictOut(BaseModel):
    kind: ConflictKind
    severity: Severity
    primary: str
    secondary: str | None = None
    message: str
    suggestion: str | None = None
    suggestions: list[str] = []

    @classmethod
    def from_conflict(cls, conflict: Conflict) -> ConflictOut:
        return cls(
            kind=conflict.kind,
            severity=conflict.severity,
            primary=conflict.primary,
            secondary=conflict.secondary,
            message=conflict.message,
            suggestion=conflict.suggestion,
            suggestions=suggestions_for(conflict),
        )


class HealthReportOut(BaseModel):
    total_mods: int
    error_count: int
    warning_count: int
    info_count: int
    score: int
    status: HealthStatus


class AnalysisRequest(BaseModel):
    file_names: list[str]
    server_game_version: str = ""
    server_loader: str = ""


class AnalysisResult(BaseModel):
    server_name: str = ""
    server_game_version: str
    server_loader: str
    files: list[ModFileEntry] = []
    records: list[ModRecordOut]
    conflicts: list[ConflictOut]
    report: HealthReportOut

    @classmethod
    def from_analysis(
        cls,
        analysis: ModAnalysis,
        server_game_version: str,
        server_loader: str,
        *,
        server_name: str = "",
        files: list[ModFileEntry] | None = None,
    ) -> AnalysisResult:
        report = analysis.report
        return cls(
            server_name=server_name,
            server_game_version=server_game_version,
            server_loader=server_loader,
            files=files or [],
            records=[ModRecordOut.from_record(r) for r in analysis.records],
            conflicts=[ConflictOut.from_conflict(c) for c in analysis.conflicts],
            report=HealthReportOut(
                total_mods=report.total_mods,
                error_count=report.error_count,
                warning_count=report.warning_count,
                info_count=report.info_count,
                score=report.score,
                status=report.status,
            ),
        )


class SuggestionsOut(BaseModel):
    suggestions: list[str]


class RuleCatalogOut(BaseModel):
    incompatibilities: dict[str, list[str]]
    dependencies: dict[str, list[str]]
