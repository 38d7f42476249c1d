"""Typed contracts for GitHub client responses."""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Generic, Optional, TypeVar

from repo_profiler.exceptions import ResourceUnavailable


T = TypeVar("T")

RESOURCE_REPO_META = "repo_meta"


class FetchState(str, Enum):
    """Normalized response state for downstream analysis."""

    OK = "ok"
    EMPTY = "empty"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class FetchResult(Generic[T]):
    """Container that separates payload from fetch semantics."""

    state: FetchState
    data: Optional[T] = None
    status_code: Optional[int] = None
    error: Optional[str] = None

    @property
    def is_ok(self) -> bool:
        return self.state == FetchState.OK

    @property
    def is_empty(self) -> bool:
        return self.state == FetchState.EMPTY

    @property
    def is_failed(self) -> bool:
        return self.state == FetchState.FAILED

    def items(self) -> list[Any]:
        """List payload, or an empty list when the fetch failed or returned a non-list."""
        if self.is_failed or not isinstance(self.data, list):
            return []
        return list(self.data)

    def unavailable(self, resource: str, *, primary: bool = False) -> ResourceUnavailable:
        return ResourceUnavailable(
            resource,
            self.error or "request failed",
            status_code=self.status_code,
            primary=primary,
        )


@dataclass(frozen=True, slots=True)
class FileEntry:
    """One entry of a repository directory listing."""

    name: str
    download_url: Optional[str] = None
    type: str = "file"
    path: str = ""

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> FileEntry | None:
        name = str(payload.get("name") or "").strip()
        if not name:
            return None
        download_url = payload.get("download_url")
        return cls(
            name=name,
            download_url=download_url if isinstance(download_url, str) and download_url else None,
            type=str(payload.get("type") or "file"),
            path=str(payload.get("path") or name),
        )


@dataclass(frozen=True, slots=True)
class CommitSummary:
    """Per-commit change volume, used only in aggregate."""

    stats_total: Optional[int] = None

    @classmethod
    def from_payload(cls, payload: Any) -> CommitSummary:
        if not isinstance(payload, dict):
            return cls()
        stats = payload.get("stats")
        total = stats.get("total") if isinstance(stats, dict) else None
        if isinstance(total, bool) or not isinstance(total, (int, float)):
            return cls()
        return cls(stats_total=int(total))


RepoPayload = dict[str, Any]
ListPayload = list[Any]
ContentPayload = str

RepoContract = FetchResult[RepoPayload]
ListContract = FetchResult[ListPayload]
ContentContract = FetchResult[ContentPayload]


@dataclass(frozen=True, slots=True)
class RawFetchBundle:
    """Settled outcome of the six primary fetches for one analysis run."""

    repo_meta: RepoContract
    contents: ListContract
    commits: ListContract
    pull_requests: ListContract
    contributors: ListContract
    branches: ListContract

    def file_entries(self) -> list[FileEntry]:
        entries: list[FileEntry] = []
        for payload in self.contents.items():
            if not isinstance(payload, dict):
                continue
            entry = FileEntry.from_payload(payload)
            if entry is not None:
                entries.append(entry)
        return entries

    def commit_summaries(self) -> list[CommitSummary] | None:
        """Commit summaries, or None when the commit history could not be fetched."""
        if self.commits.is_failed:
            return None
        return [CommitSummary.from_payload(item) for item in self.commits.items()]

    def failures(self) -> dict[str, ResourceUnavailable]:
        failed: dict[str, ResourceUnavailable] = {}
        for item in fields(self):
            result: FetchResult[Any] = getattr(self, item.name)
            if result.is_failed:
                failed[item.name] = result.unavailable(item.name, primary=item.name == RESOURCE_REPO_META)
        return failed
