"""Repository URL parsing."""

from __future__ import annotations

import re

from repo_profiler.exceptions import InvalidReferenceError
from repo_profiler.models.reference import RepositoryReference
from repo_profiler.utils.helpers import sanitize_url

OWNER_SEGMENT = 3
PROJECT_SEGMENT = 4

# Characters GitHub allows in account and repository names.
NAME_PATTERN = re.compile(r"[A-Za-z0-9_.-]+")


def parse_reference(url: str) -> RepositoryReference:
    """Extract the owner and project from a repository URL.

    ``https://github.com/<owner>/<project>`` splits on ``/`` into five or more
    segments; the fourth and fifth are the owner and project. Any query string,
    fragment or ``.git`` suffix on the project segment is dropped.

    Raises:
        InvalidReferenceError: If either segment is missing, empty or holds
            characters GitHub does not allow in names.
    """
    if not isinstance(url, str) or not url.strip():
        raise InvalidReferenceError(str(url), "URL is empty")

    segments = sanitize_url(url).split("/")
    if len(segments) <= PROJECT_SEGMENT:
        raise InvalidReferenceError(url, "missing owner or project segment")

    owner = segments[OWNER_SEGMENT].strip()
    project = re.split(r"[?#]", segments[PROJECT_SEGMENT], maxsplit=1)[0].strip()
    if project.endswith(".git"):
        project = project[: -len(".git")]

    if not owner:
        raise InvalidReferenceError(url, "owner segment is empty")
    if not project:
        raise InvalidReferenceError(url, "project segment is empty")
    if not NAME_PATTERN.fullmatch(owner) or owner in (".", ".."):
        raise InvalidReferenceError(url, "owner segment contains invalid characters")
    if not NAME_PATTERN.fullmatch(project) or project in (".", ".."):
        raise InvalidReferenceError(url, "project segment contains invalid characters")

    return RepositoryReference(owner=owner, project=project)
