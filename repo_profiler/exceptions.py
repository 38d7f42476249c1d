"""Exceptions raised by the repository analysis engine."""


class RepositoryAnalysisError(Exception):
    """Base error for a repository analysis run."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidReferenceError(RepositoryAnalysisError):
    """The repository URL does not contain an owner and project segment."""

    def __init__(self, url: str, reason: str = "expected https://github.com/<owner>/<project>"):
        self.url = url
        self.reason = reason
        super().__init__(f"Invalid repository URL {url!r}: {reason}")


class ResourceUnavailable(RepositoryAnalysisError):
    """A single hosting API resource could not be fetched.

    Non-primary failures are recovered locally by degrading the affected
    metric group. Primary failures abort the analysis.
    """

    def __init__(
        self,
        resource: str,
        reason: str,
        status_code: int | None = None,
        primary: bool = False,
    ):
        self.resource = resource
        self.reason = reason
        self.status_code = status_code
        self.primary = primary
        super().__init__(f"Resource {resource} unavailable: {reason}")


class RepositoryNotFound(ResourceUnavailable):
    """Repository metadata could not be fetched; nothing can be profiled."""

    def __init__(self, full_name: str, reason: str, status_code: int | None = None):
        self.full_name = full_name
        super().__init__("repo_meta", reason, status_code=status_code, primary=True)
        self.message = f"Repository {full_name} could not be loaded: {reason}"
        self.args = (self.message,)
