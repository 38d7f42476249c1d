"""Application settings and configuration"""

from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # Application
    APP_NAME: str = "Repository Profiler"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # GitHub API
    GITHUB_API_BASE_URL: str = "https://api.github.com"
    GITHUB_API_VERSION: str = "2022-11-28"
    USER_AGENT: Optional[str] = None  # defaults to "<APP_NAME>/<APP_VERSION>"
    COMMITS_PER_PAGE: int = 30

    # Dependency health (no vulnerability database is consulted)
    MANIFEST_FILENAMES: list[str] = ["package.json", "composer.json"]
    OUTDATED_DEPENDENCY_RATIO: float = 0.15
    VULNERABLE_DEPENDENCY_RATIO: float = 0.02

    # Live preview sandbox for web applications
    PREVIEW_BASE_URL: str = "https://stackblitz.com/github"

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"  # Ignore extra fields in .env

    @property
    def user_agent(self) -> str:
        if self.USER_AGENT:
            return self.USER_AGENT
        return f"{self.APP_NAME.replace(' ', '')}/{self.APP_VERSION}"


settings = Settings()
