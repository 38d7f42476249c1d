from repo_profiler.crawlers.github.contracts import CommitSummary, FetchResult, FetchState, RawFetchBundle
from repo_profiler.models.profile import QualityMetrics
from repo_profiler.services.metrics_synthesizer import average_churn, synthesize_activity, synthesize_quality


def _ok(data):
    return FetchResult(state=FetchState.OK, data=data, status_code=200)


def _failed():
    return FetchResult(state=FetchState.FAILED, status_code=500, error="HTTP 500")


def _bundle(**overrides) -> RawFetchBundle:
    resources = {
        "repo_meta": _ok({"name": "widgets", "updated_at": "2024-01-01T00:00:00Z"}),
        "contents": _ok([]),
        "commits": _ok([{"stats": {"total": 20}}, {"stats": {"total": 30}}]),
        "pull_requests": _ok([{}, {}, {}]),
        "contributors": _ok([{}]),
        "branches": _ok([{}, {}]),
    }
    resources.update(overrides)
    return RawFetchBundle(**resources)


def test_quality_is_derived_from_average_churn() -> None:
    quality = synthesize_quality([CommitSummary(20), CommitSummary(30)])

    assert quality.code_smells == 2
    assert quality.technical_debt_days == 1
    assert quality.test_coverage_pct == 93
    assert quality.duplication_pct == 0.5


def test_missing_commit_stats_count_as_zero() -> None:
    assert average_churn([CommitSummary(40), CommitSummary(None)]) == 20


def test_empty_commit_history_reports_not_available() -> None:
    quality = synthesize_quality([])

    assert quality == QualityMetrics.not_available()
    assert quality.is_available is False
    assert quality.to_dict() == {
        "test_coverage_pct": "N/A",
        "code_smells": "N/A",
        "technical_debt_days": "N/A",
        "duplication_pct": "N/A",
    }


def test_failed_commit_fetch_reports_not_available() -> None:
    assert synthesize_quality(None) == QualityMetrics.not_available()


def test_heuristic_estimates_stay_within_bounds() -> None:
    heavy = synthesize_quality([CommitSummary(100_000)])
    light = synthesize_quality([CommitSummary(0)])

    assert heavy.test_coverage_pct == 60
    assert heavy.duplication_pct == 20.0
    assert light.test_coverage_pct == 95
    assert light.duplication_pct == 0.0
    assert light.code_smells == 0


def test_activity_counts_resources_and_formats_last_update() -> None:
    activity = synthesize_activity(_bundle())

    assert activity.commits == 2
    assert activity.pull_requests == 3
    assert activity.contributors == 1
    assert activity.branches == 2
    assert activity.last_update == "1/1/2024"


def test_activity_counts_failed_resources_as_zero() -> None:
    activity = synthesize_activity(_bundle(commits=_failed(), branches=_failed()))

    assert activity.commits == 0
    assert activity.branches == 0
    assert activity.pull_requests == 3


def test_activity_last_update_placeholder_when_timestamp_missing() -> None:
    activity = synthesize_activity(_bundle(repo_meta=_ok({"name": "widgets"})))

    assert activity.last_update == "N/A"
