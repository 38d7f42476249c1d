"""Analysis result models"""

from repo_profiler.models.profile import (
    ActivityMetrics,
    DependencyMetrics,
    ProjectClassification,
    QualityMetrics,
    RepositoryProfile,
)
from repo_profiler.models.reference import RepositoryReference

__all__ = [
    "ActivityMetrics",
    "DependencyMetrics",
    "ProjectClassification",
    "QualityMetrics",
    "RepositoryProfile",
    "RepositoryReference",
]
