"""Repository profiling engine for GitHub-hosted projects."""

from repo_profiler.orchestrator import AnalysisOutcome, RepositoryAnalyzer, analyze

__all__ = ["AnalysisOutcome", "RepositoryAnalyzer", "analyze"]
