"""GitHub crawler primitives."""

from repo_profiler.crawlers.github.client import GitHubClient
from repo_profiler.crawlers.github.contracts import (
    CommitSummary,
    ContentContract,
    FetchResult,
    FetchState,
    FileEntry,
    ListContract,
    RawFetchBundle,
    RepoContract,
)
from repo_profiler.crawlers.github.fetch_stage import FetchStage

__all__ = [
    "GitHubClient",
    "FetchStage",
    "FetchState",
    "FetchResult",
    "FileEntry",
    "CommitSummary",
    "RawFetchBundle",
    "RepoContract",
    "ListContract",
    "ContentContract",
]
