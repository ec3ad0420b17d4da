"""GitHub access for one pull request, backed by PyGithub."""

import logging
from typing import Protocol

import requests
from github import Auth, Github, GithubException

from .errors import RemoteCallError

logger = logging.getLogger(__name__)


class PullRequestClient(Protocol):
    def is_draft(self) -> bool: ...

    def changed_files(self) -> list[str]: ...

    def author(self) -> str: ...

    def group_members(self, org: str, team: str) -> list[str]: ...

    def request_reviewers(self, individuals: list[str], groups: list[str]) -> None: ...


def _error_message(e: GithubException) -> str:
    if isinstance(e.data, dict) and e.data.get("message"):
        return e.data["message"]
    return str(e)


class GitHubPullRequestClient:
    def __init__(self, token: str, repository: str, pull_number: int, gh: Github | None = None):
        self.repository = repository
        self.pull_number = pull_number
        self._gh = gh or Github(auth=Auth.Token(token))
        self._pr = None

    def _call(self, operation: str, fn):
        try:
            return fn()
        except GithubException as e:
            raise RemoteCallError(operation, _error_message(e), e.status) from e
        except requests.exceptions.RequestException as e:
            raise RemoteCallError(operation, str(e)) from e

    @property
    def pr(self):
        if self._pr is None:
            self._pr = self._call(
                f"get pull request #{self.pull_number} in {self.repository}",
                lambda: self._gh.get_repo(self.repository).get_pull(self.pull_number),
            )
        return self._pr

    def is_draft(self) -> bool:
        return bool(self.pr.draft)

    def changed_files(self) -> list[str]:
        return self._call("list changed files",
                          lambda: [f.filename for f in self.pr.get_files()])

    def author(self) -> str:
        return self.pr.user.login

    def group_members(self, org: str, team: str) -> list[str]:
        def fetch():
            t = self._gh.get_organization(org).get_team_by_slug(team)
            return [member.login for member in t.get_members()]
        logger.debug("Getting members for team %s/%s", org, team)
        return self._call(f"get members of team {org}/{team}", fetch)

    def request_reviewers(self, individuals: list[str], groups: list[str]) -> None:
        self._call("create review request",
                   lambda: self.pr.create_review_request(reviewers=individuals,
                                                         team_reviewers=groups))
