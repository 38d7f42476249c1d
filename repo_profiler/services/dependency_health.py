"""Dependency health estimation from a repository manifest."""

from __future__ import annotations

import json
import logging
import math
from typing import Any, Iterable, Sequence

from pydantic import BaseModel, ValidationError, field_validator

from repo_profiler.config.settings import settings
from repo_profiler.crawlers.github.contracts import FileEntry
from repo_profiler.models.profile import DependencyMetrics

logger = logging.getLogger(__name__)

# Manifest file name -> (runtime grouping key, development grouping key)
MANIFEST_GROUPINGS: dict[str, tuple[str, str]] = {
    "package.json": ("dependencies", "devDependencies"),
    "composer.json": ("require", "require-dev"),
}


class DependencyManifest(BaseModel):
    """Validated dependency groupings of a manifest."""

    dependencies: dict[str, Any] = {}
    dev_dependencies: dict[str, Any] = {}

    @field_validator("dependencies", "dev_dependencies", mode="before")
    @classmethod
    def validate_grouping(cls, value: Any) -> Any:
        if value is None:
            return {}
        return value

    @field_validator("dependencies", "dev_dependencies")
    @classmethod
    def drop_blank_names(cls, value: dict[str, Any]) -> dict[str, Any]:
        return {name.strip(): spec for name, spec in value.items() if name.strip()}

    @classmethod
    def parse(cls, filename: str, raw_text: str) -> DependencyManifest:
        payload = json.loads(raw_text)
        if not isinstance(payload, dict):
            raise TypeError(f"{filename} must contain a JSON object")
        runtime_key, dev_key = MANIFEST_GROUPINGS.get(filename, MANIFEST_GROUPINGS["package.json"])
        return cls.model_validate(
            {
                "dependencies": payload.get(runtime_key),
                "dev_dependencies": payload.get(dev_key),
            }
        )

    def names(self) -> set[str]:
        return set(self.dependencies) | set(self.dev_dependencies)


def find_manifest(
    contents: Iterable[FileEntry],
    filenames: Sequence[str] | None = None,
) -> FileEntry | None:
    """Return the listing entry of the first manifest file name present (exact match)."""
    by_name = {entry.name: entry for entry in contents}
    for filename in filenames or settings.MANIFEST_FILENAMES:
        if filename in by_name:
            return by_name[filename]
    return None


def summarize_manifest(
    manifest: DependencyManifest,
    *,
    outdated_ratio: float | None = None,
    vulnerable_ratio: float | None = None,
) -> DependencyMetrics:
    """Count unique dependencies; outdated and vulnerable are fixed fractions of the total."""
    outdated_ratio = settings.OUTDATED_DEPENDENCY_RATIO if outdated_ratio is None else outdated_ratio
    vulnerable_ratio = settings.VULNERABLE_DEPENDENCY_RATIO if vulnerable_ratio is None else vulnerable_ratio

    total = len(manifest.names())
    return DependencyMetrics(
        total=total,
        outdated=math.floor(total * outdated_ratio),
        vulnerable=math.floor(total * vulnerable_ratio),
    )


class DependencyHealthService:
    """Fetch and evaluate the repository manifest with zeroed fallback."""

    def __init__(
        self,
        client: Any,
        *,
        manifest_filenames: Sequence[str] | None = None,
        outdated_ratio: float | None = None,
        vulnerable_ratio: float | None = None,
    ) -> None:
        self._client = client
        self._manifest_filenames = tuple(manifest_filenames or settings.MANIFEST_FILENAMES)
        self._outdated_ratio = outdated_ratio
        self._vulnerable_ratio = vulnerable_ratio

    async def evaluate(self, contents: Sequence[FileEntry]) -> DependencyMetrics:
        entry = find_manifest(contents, self._manifest_filenames)
        if entry is None:
            return DependencyMetrics()

        if not entry.download_url:
            logger.info("Manifest has no download URL, skipping dependency health", extra={"manifest": entry.name})
            return DependencyMetrics()

        response = await self._client.get_raw(entry.download_url)
        if response.is_failed or not response.data:
            logger.warning(
                "Manifest fetch failed, reporting empty dependency health",
                extra={"manifest": entry.name, "error": response.error},
            )
            return DependencyMetrics()

        try:
            manifest = DependencyManifest.parse(entry.name, response.data)
        except (ValidationError, ValueError, TypeError) as exc:
            logger.warning(
                "Manifest could not be parsed, reporting empty dependency health",
                extra={"manifest": entry.name, "error": str(exc)},
            )
            return DependencyMetrics()

        return summarize_manifest(
            manifest,
            outdated_ratio=self._outdated_ratio,
            vulnerable_ratio=self._vulnerable_ratio,
        )
