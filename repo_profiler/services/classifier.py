"""Rule-based project type and technology stack classification."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable

from repo_profiler.crawlers.github.contracts import FileEntry
from repo_profiler.models.profile import ProjectClassification

UNKNOWN_PROJECT_TYPE = "Unknown Project Type"

Predicate = Callable[[frozenset[str]], bool]


@dataclass(frozen=True, slots=True)
class ClassificationRule:
    """A label applied when its predicate matches the normalized file names."""

    label: str
    predicate: Predicate

    def matches(self, names: frozenset[str]) -> bool:
        return self.predicate(names)


def has(*candidates: str) -> Predicate:
    """Match when any of the given names is present."""
    wanted = frozenset(candidate.lower() for candidate in candidates)
    return lambda names: not wanted.isdisjoint(names)


def has_prefix(*prefixes: str) -> Predicate:
    """Match when a name starts with one of the given prefixes (config files with varying extensions)."""
    lowered = tuple(prefix.lower() for prefix in prefixes)
    return lambda names: any(name.startswith(lowered) for name in names)


def has_suffix(*suffixes: str) -> Predicate:
    lowered = tuple(suffix.lower() for suffix in suffixes)
    return lambda names: any(name.endswith(lowered) for name in names)


def has_suffix_except(suffixes: tuple[str, ...], excluded: frozenset[str]) -> Predicate:
    """Match a name with one of the suffixes that is not in the excluded set."""
    lowered = tuple(suffix.lower() for suffix in suffixes)
    return lambda names: any(name.endswith(lowered) and name not in excluded for name in names)


def any_of(*predicates: Predicate) -> Predicate:
    return lambda names: any(predicate(names) for predicate in predicates)


def all_of(*predicates: Predicate) -> Predicate:
    return lambda names: all(predicate(names) for predicate in predicates)


# YAML files that configure tooling rather than deployments.
NON_ORCHESTRATION_YAML = frozenset(
    {
        "pubspec.yaml",
        ".travis.yml",
        ".gitlab-ci.yml",
        "codecov.yml",
        ".codecov.yml",
        "mkdocs.yml",
        ".pre-commit-config.yaml",
        ".readthedocs.yml",
        ".readthedocs.yaml",
        ".golangci.yml",
        "environment.yml",
        "pnpm-lock.yaml",
        "pnpm-workspace.yaml",
        "_config.yml",
    }
)

# First match wins. Within a tier, framework-qualified rules precede the generic one.
PROJECT_TYPE_RULES: tuple[ClassificationRule, ...] = (
    # Mobile and desktop
    ClassificationRule("Flutter Application", has("pubspec.yaml")),
    ClassificationRule(
        "React Native Application",
        all_of(has("package.json"), has("app.json", "metro.config.js"), has("android", "ios")),
    ),
    ClassificationRule("Electron Desktop Application", has_prefix("electron-builder.", "forge.config.")),
    ClassificationRule("Tauri Desktop Application", has("src-tauri")),
    ClassificationRule(
        "Android Application",
        any_of(
            has("androidmanifest.xml"),
            all_of(has("build.gradle", "build.gradle.kts"), has("android", "app")),
        ),
    ),
    ClassificationRule("iOS Application", any_of(has("podfile"), has_suffix(".xcodeproj", ".xcworkspace"))),
    # Node.js
    ClassificationRule("Next.js Application", has_prefix("next.config.")),
    ClassificationRule("Nuxt.js Application", has_prefix("nuxt.config.")),
    ClassificationRule("Angular Application", has("angular.json")),
    ClassificationRule("Vue.js Application", has_prefix("vue.config.")),
    ClassificationRule("Svelte Application", has_prefix("svelte.config.")),
    ClassificationRule("Gatsby Site", has_prefix("gatsby-config.")),
    ClassificationRule("Node.js Project", has("package.json")),
    # Python
    ClassificationRule("Django Application", has("manage.py")),
    ClassificationRule("Python Project", has("requirements.txt", "setup.py", "pyproject.toml")),
    # Ruby
    ClassificationRule("Ruby on Rails Application", all_of(has("gemfile"), has("config.ru", "bin"), has("app"))),
    ClassificationRule("Ruby Project", has("gemfile")),
    # Go / Rust
    ClassificationRule("Go Project", has("go.mod")),
    ClassificationRule("Rust Project", has("cargo.toml")),
    # PHP
    ClassificationRule("Laravel Application", all_of(has("composer.json"), has("artisan"))),
    ClassificationRule("PHP Project", has("composer.json")),
    # Java
    ClassificationRule("Java (Maven) Project", has("pom.xml")),
    ClassificationRule("Java (Gradle) Project", has("build.gradle", "build.gradle.kts")),
    # Containers and orchestration
    ClassificationRule("Docker Container", has("dockerfile", "docker-compose.yml", "docker-compose.yaml")),
    ClassificationRule(
        "Kubernetes Configuration",
        any_of(has("kubernetes", "k8s"), has_suffix_except((".yaml", ".yml"), NON_ORCHESTRATION_YAML)),
    ),
    # Static site
    ClassificationRule("Static Website", has("index.html")),
)

# Every matching rule contributes its label.
TECH_STACK_RULES: tuple[ClassificationRule, ...] = (
    # Languages and runtimes
    ClassificationRule("Node.js", has("package.json")),
    ClassificationRule("TypeScript", has("tsconfig.json")),
    ClassificationRule("Python", has("requirements.txt", "setup.py", "pyproject.toml", "pipfile")),
    ClassificationRule("Ruby", has("gemfile")),
    ClassificationRule("Go", has("go.mod")),
    ClassificationRule("Rust", has("cargo.toml")),
    ClassificationRule("PHP", has("composer.json")),
    ClassificationRule("Java", has("pom.xml", "build.gradle", "build.gradle.kts")),
    ClassificationRule("Kotlin", has("build.gradle.kts")),
    ClassificationRule("Dart", has("pubspec.yaml")),
    ClassificationRule("Swift", any_of(has("package.swift", "podfile"), has_suffix(".xcodeproj"))),
    # Mobile and desktop
    ClassificationRule("Flutter", has("pubspec.yaml")),
    ClassificationRule("React Native", all_of(has("package.json"), has("app.json", "metro.config.js"), has("android", "ios"))),
    ClassificationRule("Android", has("android", "androidmanifest.xml")),
    ClassificationRule("iOS", any_of(has("ios", "podfile"), has_suffix(".xcodeproj", ".xcworkspace"))),
    ClassificationRule("Electron", has_prefix("electron-builder.", "forge.config.")),
    ClassificationRule("Tauri", has("src-tauri")),
    # Frontend
    ClassificationRule("React", has_prefix("next.config.", "gatsby-config.")),
    ClassificationRule("Next.js", has_prefix("next.config.")),
    ClassificationRule("Nuxt.js", has_prefix("nuxt.config.")),
    ClassificationRule("Vue.js", has_prefix("vue.config.", "nuxt.config.")),
    ClassificationRule("Angular", has("angular.json")),
    ClassificationRule("Svelte", has_prefix("svelte.config.")),
    ClassificationRule("Gatsby", has_prefix("gatsby-config.")),
    ClassificationRule("Tailwind CSS", has_prefix("tailwind.config.")),
    ClassificationRule("Vite", has_prefix("vite.config.")),
    ClassificationRule("Webpack", has_prefix("webpack.config.")),
    # Backend
    ClassificationRule("Django", has("manage.py")),
    ClassificationRule("Ruby on Rails", all_of(has("gemfile"), has("config.ru"))),
    ClassificationRule("Laravel", has("artisan")),
    # Datastores
    ClassificationRule("Prisma", has("prisma", "schema.prisma")),
    ClassificationRule("Firebase", has("firebase.json", ".firebaserc")),
    ClassificationRule("Supabase", has("supabase")),
    ClassificationRule("PostgreSQL", has("init.sql", "postgres", "postgresql.conf")),
    ClassificationRule("Redis", has("redis.conf")),
    # Infrastructure and CI/CD
    ClassificationRule("Docker", has("dockerfile", "docker-compose.yml", "docker-compose.yaml", ".dockerignore")),
    ClassificationRule("Kubernetes", has("kubernetes", "k8s", "helm", "chart.yaml")),
    ClassificationRule("GitHub Actions", has(".github")),
    ClassificationRule("GitLab CI", has(".gitlab-ci.yml")),
    ClassificationRule("Travis CI", has(".travis.yml")),
    ClassificationRule("CircleCI", has(".circleci")),
    ClassificationRule("Jenkins", has("jenkinsfile")),
    # Testing
    ClassificationRule("Jest", has_prefix("jest.config.")),
    ClassificationRule("Vitest", has_prefix("vitest.config.")),
    ClassificationRule("Cypress", any_of(has("cypress", "cypress.json"), has_prefix("cypress.config."))),
    ClassificationRule("Playwright", has_prefix("playwright.config.")),
    ClassificationRule("Pytest", has("pytest.ini", "conftest.py", "tox.ini")),
)

# Project types a browser sandbox can boot straight from the repository.
WEB_APPLICATION_TYPES = frozenset(
    {
        "Next.js Application",
        "Nuxt.js Application",
        "Angular Application",
        "Vue.js Application",
        "Svelte Application",
        "Gatsby Site",
        "Node.js Project",
        "Static Website",
    }
)

MOBILE_APPLICATION_TYPES = frozenset(
    {
        "Flutter Application",
        "React Native Application",
        "Android Application",
        "iOS Application",
    }
)

DESKTOP_APPLICATION_TYPES = frozenset({"Electron Desktop Application", "Tauri Desktop Application"})


def normalize_names(contents: Iterable[FileEntry]) -> frozenset[str]:
    return frozenset(entry.name.strip().lower() for entry in contents if entry.name.strip())


def detect_project_type(
    names: frozenset[str],
    rules: tuple[ClassificationRule, ...] = PROJECT_TYPE_RULES,
) -> str:
    for rule in rules:
        if rule.matches(names):
            return rule.label
    return UNKNOWN_PROJECT_TYPE


def detect_tech_stack(
    names: frozenset[str],
    rules: tuple[ClassificationRule, ...] = TECH_STACK_RULES,
) -> frozenset[str]:
    return frozenset(rule.label for rule in rules if rule.matches(names))


def classify(contents: Iterable[FileEntry]) -> ProjectClassification:
    """Classify a repository from its root file listing.

    Project type is decided by the first matching rule; the tech stack is
    the set of labels of every matching stack rule.
    """
    names = normalize_names(contents)
    return ProjectClassification(
        project_type=detect_project_type(names),
        tech_stack=detect_tech_stack(names),
    )


def is_web_application(project_type: str) -> bool:
    return project_type in WEB_APPLICATION_TYPES


def application_kind(project_type: str) -> str:
    """Coarse application family used by the renderer to pick a preview mode."""
    if project_type in WEB_APPLICATION_TYPES:
        return "web-application"
    if project_type in MOBILE_APPLICATION_TYPES:
        return "mobile-application"
    if project_type in DESKTOP_APPLICATION_TYPES:
        return "desktop-application"
    return "unknown"
