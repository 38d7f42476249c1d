"""Async GitHub REST client returning normalized fetch contracts."""

from __future__ import annotations

import json
import logging
from typing import Any

import httpx

from repo_profiler.config.settings import settings
from repo_profiler.crawlers.github.contracts import (
    ContentContract,
    FetchResult,
    FetchState,
    ListContract,
    RepoContract,
)

logger = logging.getLogger(__name__)


class GitHubClient:
    """Read-only GitHub client.

    Every call settles as a FetchResult: non-2xx responses, transport errors
    and undecodable bodies become FAILED results instead of exceptions. No
    request is retried.
    """

    def __init__(
        self,
        *,
        base_url: str | None = None,
        user_agent: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = (base_url or settings.GITHUB_API_BASE_URL).rstrip("/")
        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            headers={
                "Accept": "application/vnd.github+json",
                "X-GitHub-Api-Version": settings.GITHUB_API_VERSION,
                "User-Agent": user_agent or settings.user_agent,
            },
            transport=transport,
        )

    async def __aenter__(self) -> GitHubClient:
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        del exc_type, exc, tb
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def get_repo(self, owner: str, repo: str) -> RepoContract:
        return await self._request(f"/repos/{owner}/{repo}")

    async def list_contents(self, owner: str, repo: str) -> ListContract:
        return await self._request(f"/repos/{owner}/{repo}/contents")

    async def list_commits(self, owner: str, repo: str, *, per_page: int | None = None) -> ListContract:
        return await self._request(
            f"/repos/{owner}/{repo}/commits",
            params={"per_page": per_page or settings.COMMITS_PER_PAGE},
        )

    async def list_pull_requests(self, owner: str, repo: str, *, state: str = "all") -> ListContract:
        return await self._request(f"/repos/{owner}/{repo}/pulls", params={"state": state})

    async def list_contributors(self, owner: str, repo: str) -> ListContract:
        return await self._request(f"/repos/{owner}/{repo}/contributors")

    async def list_branches(self, owner: str, repo: str) -> ListContract:
        return await self._request(f"/repos/{owner}/{repo}/branches")

    async def get_raw(self, url: str) -> ContentContract:
        """Fetch raw file content from an absolute download URL."""
        return await self._request(url, decode_json=False)

    async def _request(
        self,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        decode_json: bool = True,
    ) -> FetchResult[Any]:
        try:
            response = await self._client.get(path, params=params)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            error = f"{type(exc).__name__}: {exc}"
            logger.warning(
                "GitHub request failed",
                extra={"path": path, "status_code": None, "error": error},
            )
            return FetchResult(state=FetchState.FAILED, error=error)

        if not response.is_success:
            error = f"HTTP {response.status_code}"
            message = self._error_message(response)
            if message:
                error = f"{error}: {message}"
            logger.warning(
                "GitHub request failed",
                extra={"path": path, "status_code": response.status_code, "error": error},
            )
            return FetchResult(state=FetchState.FAILED, status_code=response.status_code, error=error)

        if not decode_json:
            text = response.text
            state = FetchState.OK if text.strip() else FetchState.EMPTY
            return FetchResult(state=state, data=text, status_code=response.status_code)

        try:
            payload = response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            error = f"Invalid JSON response: {exc}"
            logger.warning(
                "GitHub request failed",
                extra={"path": path, "status_code": response.status_code, "error": error},
            )
            return FetchResult(state=FetchState.FAILED, status_code=response.status_code, error=error)

        state = FetchState.OK if payload else FetchState.EMPTY
        return FetchResult(state=state, data=payload, status_code=response.status_code)

    @staticmethod
    def _error_message(response: httpx.Response) -> str | None:
        try:
            body = response.json()
        except (json.JSONDecodeError, UnicodeDecodeError):
            return None
        if isinstance(body, dict) and isinstance(body.get("message"), str):
            return body["message"]
        return None
