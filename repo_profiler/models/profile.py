"""Repository profile contracts handed to the presentation layer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal, Optional

from repo_profiler.utils.helpers import NOT_AVAILABLE, display_metric

ProfileStatus = Literal["ready"]


@dataclass(frozen=True, slots=True)
class ProjectClassification:
    """Derived project type and technology stack."""

    project_type: str
    tech_stack: frozenset[str] = field(default_factory=frozenset)


@dataclass(frozen=True, slots=True)
class QualityMetrics:
    """Heuristic code quality estimates. ``None`` means not available."""

    test_coverage_pct: Optional[int] = None
    code_smells: Optional[int] = None
    technical_debt_days: Optional[int] = None
    duplication_pct: Optional[float] = None

    @classmethod
    def not_available(cls) -> QualityMetrics:
        return cls()

    @property
    def is_available(self) -> bool:
        return self.code_smells is not None

    def to_dict(self) -> dict[str, Any]:
        return {
            "test_coverage_pct": display_metric(self.test_coverage_pct),
            "code_smells": display_metric(self.code_smells),
            "technical_debt_days": display_metric(self.technical_debt_days),
            "duplication_pct": display_metric(self.duplication_pct),
        }


@dataclass(frozen=True, slots=True)
class DependencyMetrics:
    """Dependency counts from the repository manifest."""

    total: int = 0
    outdated: int = 0
    vulnerable: int = 0

    def to_dict(self) -> dict[str, int]:
        return {"total": self.total, "outdated": self.outdated, "vulnerable": self.vulnerable}


@dataclass(frozen=True, slots=True)
class ActivityMetrics:
    """Repository activity counts."""

    commits: int = 0
    branches: int = 0
    pull_requests: int = 0
    contributors: int = 0
    last_update: str = NOT_AVAILABLE

    def to_dict(self) -> dict[str, Any]:
        return {
            "commits": self.commits,
            "branches": self.branches,
            "pull_requests": self.pull_requests,
            "contributors": self.contributors,
            "last_update": self.last_update,
        }


@dataclass(frozen=True, slots=True)
class RepositoryProfile:
    """Synthesized profile of a single repository.

    Every field is always present; degraded metric groups carry their
    placeholder values instead of being omitted.
    """

    name: str
    full_name: str
    html_url: str
    description: Optional[str]
    project_type: str
    language: str
    tech_stack: frozenset[str]
    quality: QualityMetrics
    dependencies: DependencyMetrics
    activity: ActivityMetrics
    stars: int = 0
    forks: int = 0
    open_issues: int = 0
    preview_url: Optional[str] = None
    application_kind: str = "unknown"
    status: ProfileStatus = "ready"

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "full_name": self.full_name,
            "html_url": self.html_url,
            "description": self.description,
            "project_type": self.project_type,
            "language": self.language,
            "tech_stack": sorted(self.tech_stack),
            "quality": self.quality.to_dict(),
            "dependencies": self.dependencies.to_dict(),
            "activity": self.activity.to_dict(),
            "stars": self.stars,
            "forks": self.forks,
            "open_issues": self.open_issues,
            "preview_url": self.preview_url,
            "application_kind": self.application_kind,
            "status": self.status,
        }
