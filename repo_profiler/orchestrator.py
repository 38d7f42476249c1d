"""Repository analysis orchestrator: parse, fetch, classify, synthesize, assemble."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Callable, Literal

from repo_profiler.crawlers.github.client import GitHubClient
from repo_profiler.crawlers.github.fetch_stage import FetchStage
from repo_profiler.exceptions import InvalidReferenceError, RepositoryAnalysisError, RepositoryNotFound
from repo_profiler.models.profile import RepositoryProfile
from repo_profiler.models.reference import RepositoryReference
from repo_profiler.services.classifier import classify
from repo_profiler.services.dependency_health import DependencyHealthService
from repo_profiler.services.metrics_synthesizer import synthesize_activity, synthesize_quality
from repo_profiler.services.profile_assembler import assemble_profile
from repo_profiler.services.reference_parser import parse_reference

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class AnalysisOutcome:
    """Discriminated result of one analysis: a profile or an error detail."""

    kind: Literal["ok", "error"]
    profile: RepositoryProfile | None = None
    detail: str | None = None

    @property
    def is_ok(self) -> bool:
        return self.kind == "ok"

    @classmethod
    def ok(cls, profile: RepositoryProfile) -> AnalysisOutcome:
        return cls(kind="ok", profile=profile)

    @classmethod
    def error(cls, detail: str) -> AnalysisOutcome:
        return cls(kind="error", detail=detail)


class RepositoryAnalyzer:
    """Produce a RepositoryProfile for a GitHub repository URL.

    Each call opens its own client, so concurrent analyses share no state.
    """

    def __init__(
        self,
        *,
        github_client_factory: Callable[[], Any] = GitHubClient,
        dependency_service_factory: Callable[[Any], Any] = DependencyHealthService,
    ) -> None:
        self._github_client_factory = github_client_factory
        self._dependency_service_factory = dependency_service_factory

    async def analyze(self, url: str) -> RepositoryProfile:
        """Analyze a repository.

        Raises:
            InvalidReferenceError: The URL has no owner/project segments. No request is made.
            RepositoryNotFound: Repository metadata could not be fetched.
        """
        reference = parse_reference(url)
        logger.info("Repository analysis started", extra={"repo": reference.full_name})

        async with self._github_client_factory() as client:
            profile = await self._analyze_reference(client, reference)

        logger.info(
            "Repository analysis completed",
            extra={
                "repo": reference.full_name,
                "project_type": profile.project_type,
                "tech_stack": sorted(profile.tech_stack),
            },
        )
        return profile

    async def run(self, url: str) -> AnalysisOutcome:
        """Analyze a repository, converting fatal errors into an error outcome."""
        try:
            return AnalysisOutcome.ok(await self.analyze(url))
        except InvalidReferenceError as exc:
            logger.info("Rejected repository URL", extra={"url": url, "error": exc.reason})
            return AnalysisOutcome.error(exc.message)
        except RepositoryNotFound as exc:
            return AnalysisOutcome.error(exc.message)
        except RepositoryAnalysisError as exc:
            logger.exception("Repository analysis failed", extra={"url": url, "error": exc.message})
            return AnalysisOutcome.error(exc.message)

    async def _analyze_reference(self, client: Any, reference: RepositoryReference) -> RepositoryProfile:
        bundle = await FetchStage(client).collect(reference)

        contents = bundle.file_entries()
        classification = classify(contents)

        # Manifest download depends on the listing; it overlaps with quality synthesis.
        dependency_task = asyncio.create_task(self._dependency_service_factory(client).evaluate(contents))
        quality = synthesize_quality(bundle.commit_summaries())
        activity = synthesize_activity(bundle)
        dependencies = await dependency_task

        repo_meta = bundle.repo_meta.data if isinstance(bundle.repo_meta.data, dict) else {}
        return assemble_profile(
            reference,
            repo_meta,
            classification,
            quality,
            dependencies,
            activity,
        )


async def analyze(url: str) -> RepositoryProfile:
    """Analyze a repository with the default GitHub client."""
    return await RepositoryAnalyzer().analyze(url)
