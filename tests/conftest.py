"""Shared test fixtures."""

import pytest

from codeowners_reviewers.config import ActionConfig
from codeowners_reviewers.errors import RemoteCallError


class FakeClient:
    """In-memory stand-in for GitHubPullRequestClient."""

    def __init__(self, files=(), author="alice", teams=None, draft=False):
        self.files = list(files)
        self.login = author
        self.teams = teams or {}
        self.draft = draft
        self.requests = []
        self.team_lookups = []

    def is_draft(self):
        return self.draft

    def changed_files(self):
        return list(self.files)

    def author(self):
        return self.login

    def group_members(self, org, team):
        self.team_lookups.append((org, team))
        members = self.teams.get(f"{org}/{team}")
        if members is None:
            raise RemoteCallError(f"get members of team {org}/{team}", "Not Found", 404)
        return list(members)

    def request_reviewers(self, individuals, groups):
        self.requests.append((list(individuals), list(groups)))


@pytest.fixture
def config(tmp_path):
    rule_file = tmp_path / "REVIEWERS"
    rule_file.write_text("")
    return ActionConfig(
        token="ghp_test",
        rule_file=str(rule_file),
        repository="org/repo",
        pull_number=7,
    )


@pytest.fixture
def write_rules(config):
    def write(text):
        with open(config.rule_file, "w", encoding="utf-8") as f:
            f.write(text)
    return write
