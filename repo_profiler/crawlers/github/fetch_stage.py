"""Concurrent primary fetch stage for repository analysis."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from repo_profiler.crawlers.github.contracts import RESOURCE_REPO_META, RawFetchBundle
from repo_profiler.exceptions import RepositoryNotFound
from repo_profiler.models.reference import RepositoryReference

logger = logging.getLogger(__name__)


class FetchStage:
    """Issue the six primary resource fetches and join them without fail-fast.

    Each request settles independently as a FetchResult. Only a failed
    repository metadata fetch is fatal, and it is reported after every
    other request has settled.
    """

    def __init__(self, client: Any, *, commits_per_page: int | None = None) -> None:
        self._client = client
        self._commits_per_page = commits_per_page

    async def collect(self, reference: RepositoryReference) -> RawFetchBundle:
        owner, project = reference.owner, reference.project

        repo_meta, contents, commits, pull_requests, contributors, branches = await asyncio.gather(
            self._client.get_repo(owner, project),
            self._client.list_contents(owner, project),
            self._client.list_commits(owner, project, per_page=self._commits_per_page),
            self._client.list_pull_requests(owner, project, state="all"),
            self._client.list_contributors(owner, project),
            self._client.list_branches(owner, project),
        )
        bundle = RawFetchBundle(
            repo_meta=repo_meta,
            contents=contents,
            commits=commits,
            pull_requests=pull_requests,
            contributors=contributors,
            branches=branches,
        )

        failures = bundle.failures()
        for resource, failure in failures.items():
            if resource == RESOURCE_REPO_META:
                continue
            logger.warning(
                "Resource unavailable, degrading metric group",
                extra={"repo": reference.full_name, "resource": resource, "error": failure.reason},
            )

        if RESOURCE_REPO_META in failures:
            failure = failures[RESOURCE_REPO_META]
            logger.error(
                "Repository metadata fetch failed",
                extra={"repo": reference.full_name, "status_code": failure.status_code, "error": failure.reason},
            )
            raise RepositoryNotFound(reference.full_name, failure.reason, status_code=failure.status_code)

        return bundle
