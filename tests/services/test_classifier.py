from repo_profiler.crawlers.github.contracts import FileEntry
from repo_profiler.services.classifier import (
    UNKNOWN_PROJECT_TYPE,
    ClassificationRule,
    application_kind,
    classify,
    detect_project_type,
    has,
    is_web_application,
    normalize_names,
)


def entries(*names: str) -> list[FileEntry]:
    return [FileEntry(name=name) for name in names]


def test_empty_listing_yields_unknown_type_and_empty_stack() -> None:
    result = classify([])

    assert result.project_type == UNKNOWN_PROJECT_TYPE
    assert result.tech_stack == frozenset()


def test_framework_marker_wins_over_generic_manifest() -> None:
    result = classify(entries("package.json", "next.config.js"))

    assert result.project_type == "Next.js Application"
    assert {"Node.js", "Next.js", "React"} <= result.tech_stack


def test_generic_manifest_with_styling_marker() -> None:
    result = classify(entries("package.json", "tailwind.config.js"))

    assert result.project_type == "Node.js Project"
    assert result.tech_stack == frozenset({"Node.js", "Tailwind CSS"})


def test_names_are_compared_case_insensitively() -> None:
    result = classify(entries("Package.JSON", "Dockerfile", "Angular.json"))

    assert result.project_type == "Angular Application"
    assert {"Node.js", "Angular", "Docker"} <= result.tech_stack


def test_tier_priority_follows_rule_order() -> None:
    assert classify(entries("requirements.txt", "Dockerfile")).project_type == "Python Project"
    assert classify(entries("manage.py", "requirements.txt")).project_type == "Django Application"
    assert classify(entries("go.mod", "index.html")).project_type == "Go Project"
    assert classify(entries("composer.json", "artisan")).project_type == "Laravel Application"
    assert classify(entries("Cargo.toml")).project_type == "Rust Project"
    assert classify(entries("pom.xml")).project_type == "Java (Maven) Project"
    assert classify(entries("Gemfile")).project_type == "Ruby Project"


def test_infrastructure_and_static_markers() -> None:
    assert classify(entries("Dockerfile", "deployment.yaml")).project_type == "Docker Container"
    assert classify(entries("deployment.yaml", "README.md")).project_type == "Kubernetes Configuration"
    assert classify(entries("kubernetes")).project_type == "Kubernetes Configuration"
    assert classify(entries("index.html", "style.css")).project_type == "Static Website"
    assert classify(entries("README.md", "LICENSE")).project_type == UNKNOWN_PROJECT_TYPE


def test_tech_stack_accumulates_every_matching_indicator() -> None:
    result = classify(
        entries(
            "package.json",
            "tsconfig.json",
            "vite.config.ts",
            "jest.config.js",
            ".github",
            "prisma",
            "docker-compose.yml",
        )
    )

    assert result.tech_stack == frozenset(
        {"Node.js", "TypeScript", "Vite", "Jest", "GitHub Actions", "Prisma", "Docker"}
    )


def test_classify_is_deterministic() -> None:
    listing = entries("package.json", "nuxt.config.ts", ".travis.yml", "cypress")

    assert classify(listing) == classify(listing)
    assert classify(list(reversed(listing))) == classify(listing)


def test_custom_rule_table_is_respected() -> None:
    rules = (ClassificationRule("Monorepo", has("lerna.json")),)

    assert detect_project_type(normalize_names(entries("lerna.json")), rules) == "Monorepo"
    assert detect_project_type(normalize_names(entries("package.json")), rules) == UNKNOWN_PROJECT_TYPE


def test_web_application_types() -> None:
    assert is_web_application("Next.js Application") is True
    assert is_web_application("Static Website") is True
    assert is_web_application("Rust Project") is False


def test_flutter_listing_is_not_mistaken_for_kubernetes() -> None:
    result = classify(entries("pubspec.yaml", "android", "ios", "lib", "README.md"))

    assert result.project_type == "Flutter Application"
    assert {"Flutter", "Dart", "Android", "iOS"} <= result.tech_stack
    assert "Kubernetes" not in result.tech_stack


def test_tooling_yaml_does_not_imply_orchestration() -> None:
    result = classify(entries("Makefile", "src", ".travis.yml", "README.md"))

    assert result.project_type == UNKNOWN_PROJECT_TYPE
    assert result.tech_stack == frozenset({"Travis CI"})

    for name in (".gitlab-ci.yml", "codecov.yml", "mkdocs.yml", ".pre-commit-config.yaml", "environment.yml"):
        assert classify(entries(name)).project_type == UNKNOWN_PROJECT_TYPE


def test_mobile_and_desktop_markers() -> None:
    react_native = classify(entries("package.json", "app.json", "android", "ios", "index.js"))
    assert react_native.project_type == "React Native Application"
    assert {"Node.js", "React Native", "Android", "iOS"} <= react_native.tech_stack

    assert classify(entries("build.gradle.kts", "app", "settings.gradle.kts")).project_type == "Android Application"
    assert classify(entries("AndroidManifest.xml")).project_type == "Android Application"
    assert classify(entries("Podfile", "Widgets.xcodeproj")).project_type == "iOS Application"
    assert classify(entries("Widgets.xcworkspace")).project_type == "iOS Application"
    assert classify(entries("package.json", "electron-builder.yml")).project_type == "Electron Desktop Application"
    assert classify(entries("package.json", "forge.config.js")).project_type == "Electron Desktop Application"
    assert classify(entries("package.json", "src-tauri", "vite.config.ts")).project_type == "Tauri Desktop Application"


def test_plain_gradle_and_node_projects_are_not_mobile() -> None:
    assert classify(entries("build.gradle", "src")).project_type == "Java (Gradle) Project"
    assert classify(entries("package.json", "app.json")).project_type == "Node.js Project"


def test_application_kind_groups_project_types() -> None:
    assert application_kind("Next.js Application") == "web-application"
    assert application_kind("Flutter Application") == "mobile-application"
    assert application_kind("iOS Application") == "mobile-application"
    assert application_kind("Tauri Desktop Application") == "desktop-application"
    assert application_kind("Rust Project") == "unknown"
    assert application_kind(UNKNOWN_PROJECT_TYPE) == "unknown"
