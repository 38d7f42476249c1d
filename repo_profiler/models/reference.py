"""Repository reference value object."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RepositoryReference:
    """An (owner, project) pair identifying a hosted repository."""

    owner: str
    project: str

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.project}"

    @property
    def html_url(self) -> str:
        return f"https://github.com/{self.full_name}"

    def __str__(self) -> str:
        return self.full_name
