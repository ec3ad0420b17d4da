"""Exceptions raised while assigning reviewers."""


class CodeownersReviewersError(Exception):
    """Base exception for all reviewer-assignment errors."""


class ConfigurationError(CodeownersReviewersError):
    """A required action input or GitHub context value is missing or invalid."""


class RuleFileError(CodeownersReviewersError):
    """The rule file could not be read."""


class RemoteCallError(CodeownersReviewersError):
    """A GitHub API call failed."""

    def __init__(self, operation: str, message: str, status: int | None = None):
        self.operation = operation
        self.status = status
        detail = f" (HTTP {status})" if status is not None else ""
        super().__init__(f"Failed to {operation}{detail}: {message}")
