from repo_profiler.models.profile import (
    ActivityMetrics,
    DependencyMetrics,
    ProjectClassification,
    QualityMetrics,
)
from repo_profiler.models.reference import RepositoryReference
from repo_profiler.services.profile_assembler import assemble_profile

REFERENCE = RepositoryReference(owner="acme", project="widgets")


def test_assemble_profile_merges_metadata_and_metrics() -> None:
    profile = assemble_profile(
        REFERENCE,
        {
            "name": "widgets",
            "full_name": "acme/widgets",
            "language": "TypeScript",
            "stargazers_count": 12,
            "forks_count": 3,
            "open_issues_count": 1,
        },
        ProjectClassification(project_type="Next.js Application", tech_stack=frozenset({"Node.js", "Next.js"})),
        QualityMetrics(test_coverage_pct=90, code_smells=5, technical_debt_days=2, duplication_pct=1.0),
        DependencyMetrics(total=10, outdated=1, vulnerable=0),
        ActivityMetrics(commits=4, branches=2, pull_requests=1, contributors=3, last_update="1/1/2024"),
    )

    assert profile.status == "ready"
    assert profile.name == "widgets"
    assert profile.language == "TypeScript"
    assert profile.stars == 12
    assert profile.preview_url == "https://stackblitz.com/github/acme/widgets"
    assert profile.to_dict()["tech_stack"] == ["Next.js", "Node.js"]


def test_assemble_profile_fills_placeholders_for_sparse_metadata() -> None:
    profile = assemble_profile(
        REFERENCE,
        {},
        ProjectClassification(project_type="Rust Project"),
        QualityMetrics.not_available(),
        DependencyMetrics(),
        ActivityMetrics(),
    )

    payload = profile.to_dict()
    assert payload["name"] == "widgets"
    assert payload["full_name"] == "acme/widgets"
    assert payload["language"] == "Unknown"
    assert payload["preview_url"] is None
    assert payload["quality"]["code_smells"] == "N/A"
    assert payload["activity"]["last_update"] == "N/A"
    assert payload["status"] == "ready"


def test_assemble_profile_coerces_malformed_counts() -> None:
    profile = assemble_profile(
        REFERENCE,
        {"stargazers_count": "1.2k", "forks_count": "7", "open_issues_count": 4.0},
        ProjectClassification(project_type="Flutter Application"),
        QualityMetrics.not_available(),
        DependencyMetrics(),
        ActivityMetrics(),
    )

    assert profile.stars == 0
    assert profile.forks == 7
    assert profile.open_issues == 4
    assert profile.preview_url is None
    assert profile.to_dict()["application_kind"] == "mobile-application"
