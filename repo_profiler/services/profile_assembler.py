"""Merge classification and metrics into the final repository profile."""

from __future__ import annotations

from typing import Any

from repo_profiler.config.settings import settings
from repo_profiler.models.profile import (
    ActivityMetrics,
    DependencyMetrics,
    ProjectClassification,
    QualityMetrics,
    RepositoryProfile,
)
from repo_profiler.models.reference import RepositoryReference
from repo_profiler.services.classifier import application_kind, is_web_application
from repo_profiler.utils.helpers import coerce_int

UNKNOWN_LANGUAGE = "Unknown"


def build_preview_url(reference: RepositoryReference, project_type: str) -> str | None:
    if not is_web_application(project_type):
        return None
    return f"{settings.PREVIEW_BASE_URL.rstrip('/')}/{reference.owner}/{reference.project}"


def assemble_profile(
    reference: RepositoryReference,
    repo_meta: dict[str, Any],
    classification: ProjectClassification,
    quality: QualityMetrics,
    dependencies: DependencyMetrics,
    activity: ActivityMetrics,
) -> RepositoryProfile:
    """Pure merge; inputs are already degraded to placeholders where needed."""
    return RepositoryProfile(
        name=str(repo_meta.get("name") or reference.project),
        full_name=str(repo_meta.get("full_name") or reference.full_name),
        html_url=str(repo_meta.get("html_url") or reference.html_url),
        description=repo_meta.get("description") or None,
        project_type=classification.project_type,
        language=str(repo_meta.get("language") or UNKNOWN_LANGUAGE),
        tech_stack=frozenset(classification.tech_stack),
        quality=quality,
        dependencies=dependencies,
        activity=activity,
        stars=coerce_int(repo_meta.get("stargazers_count")),
        forks=coerce_int(repo_meta.get("forks_count")),
        open_issues=coerce_int(repo_meta.get("open_issues_count")),
        preview_url=build_preview_url(reference, classification.project_type),
        application_kind=application_kind(classification.project_type),
        status="ready",
    )
