"""Quality and activity metric synthesis from raw fetch results."""

from __future__ import annotations

import logging
import math
from typing import Sequence

from repo_profiler.crawlers.github.contracts import CommitSummary, RawFetchBundle
from repo_profiler.models.profile import ActivityMetrics, QualityMetrics
from repo_profiler.utils.helpers import format_short_date

logger = logging.getLogger(__name__)

MAX_TEST_COVERAGE_PCT = 95
MIN_TEST_COVERAGE_PCT = 60
MAX_DUPLICATION_PCT = 20.0


def average_churn(commits: Sequence[CommitSummary]) -> float | None:
    """Mean lines changed per commit, or None for an empty sample."""
    if not commits:
        return None
    total = sum(commit.stats_total or 0 for commit in commits)
    return total / len(commits)


def synthesize_quality(commits: Sequence[CommitSummary] | None) -> QualityMetrics:
    """Estimate code quality figures from commit churn.

    These are heuristics, not measurements: smells and debt scale with the
    average churn, coverage falls from 95% and duplication rises towards 20%
    as churn grows. Missing history yields all "N/A".
    """
    if commits is None:
        return QualityMetrics.not_available()

    churn = average_churn(commits)
    if churn is None:
        logger.debug("No commits to estimate quality from")
        return QualityMetrics.not_available()

    return QualityMetrics(
        test_coverage_pct=max(MIN_TEST_COVERAGE_PCT, MAX_TEST_COVERAGE_PCT - math.floor(churn / 10)),
        code_smells=math.floor(churn / 10),
        technical_debt_days=math.floor(churn / 20),
        duplication_pct=min(MAX_DUPLICATION_PCT, round(churn / 50, 1)),
    )


def synthesize_activity(bundle: RawFetchBundle) -> ActivityMetrics:
    """Direct activity counts; a failed resource counts as zero."""
    repo_meta = bundle.repo_meta.data if isinstance(bundle.repo_meta.data, dict) else {}
    return ActivityMetrics(
        commits=len(bundle.commits.items()),
        branches=len(bundle.branches.items()),
        pull_requests=len(bundle.pull_requests.items()),
        contributors=len(bundle.contributors.items()),
        last_update=format_short_date(repo_meta.get("updated_at")),
    )
