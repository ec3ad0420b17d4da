from unittest.mock import MagicMock, Mock

import pytest
import requests
from github import GithubException, UnknownObjectException

from codeowners_reviewers.aggregate import aggregate, collect_matches
from codeowners_reviewers.errors import RemoteCallError
from codeowners_reviewers.github_client import GitHubPullRequestClient
from codeowners_reviewers.resolver import ExpandGroups
from codeowners_reviewers.rules import parse_rules


def make_client(pr=None):
    gh = MagicMock()
    pr = pr or MagicMock()
    gh.get_repo.return_value.get_pull.return_value = pr
    return GitHubPullRequestClient("ghp_test", "org/repo", 7, gh=gh), gh, pr


class TestGitHubPullRequestClient:
    def test_pull_request_is_fetched_once(self):
        client, gh, pr = make_client()
        pr.draft = False
        pr.user.login = "alice"

        assert client.is_draft() is False
        assert client.author() == "alice"
        gh.get_repo.assert_called_once_with("org/repo")
        gh.get_repo.return_value.get_pull.assert_called_once_with(7)

    def test_changed_files(self):
        client, gh, pr = make_client()
        pr.get_files.return_value = [Mock(filename="main.go"), Mock(filename="docs/a.md")]
        assert client.changed_files() == ["main.go", "docs/a.md"]

    def test_missing_pull_request(self):
        client, gh, pr = make_client()
        gh.get_repo.return_value.get_pull.side_effect = UnknownObjectException(
            404, {"message": "Not Found"}, None)
        with pytest.raises(RemoteCallError) as e:
            client.changed_files()
        assert e.value.status == 404
        assert "Not Found" in str(e.value)

    def test_changed_files_error(self):
        client, gh, pr = make_client()
        pr.get_files.side_effect = GithubException(500, {"message": "Server Error"}, None)
        with pytest.raises(RemoteCallError, match="list changed files"):
            client.changed_files()

    def test_group_members(self):
        client, gh, pr = make_client()
        team = gh.get_organization.return_value.get_team_by_slug.return_value
        team.get_members.return_value = [Mock(login="bob"), Mock(login="carol")]

        assert client.group_members("org", "reviewers") == ["bob", "carol"]
        gh.get_organization.assert_called_once_with("org")
        gh.get_organization.return_value.get_team_by_slug.assert_called_once_with("reviewers")

    def test_group_members_forbidden(self):
        client, gh, pr = make_client()
        gh.get_organization.return_value.get_team_by_slug.side_effect = GithubException(
            403, {"message": "Resource not accessible by integration"}, None)
        with pytest.raises(RemoteCallError) as e:
            client.group_members("org", "reviewers")
        assert e.value.status == 403
        assert "org/reviewers" in str(e.value)

    def test_request_reviewers(self):
        client, gh, pr = make_client()
        client.request_reviewers(["bob"], ["reviewers"])
        pr.create_review_request.assert_called_once_with(reviewers=["bob"],
                                                         team_reviewers=["reviewers"])

    def test_request_reviewers_error(self):
        client, gh, pr = make_client()
        pr.create_review_request.side_effect = GithubException(
            422, {"message": "Review cannot be requested from pull request author."}, None)
        with pytest.raises(RemoteCallError, match="pull request author"):
            client.request_reviewers(["alice"], [])

    def test_connection_error(self):
        client, gh, pr = make_client()
        pr.get_files.side_effect = requests.exceptions.ConnectionError("connection reset")
        with pytest.raises(RemoteCallError, match="connection reset") as e:
            client.changed_files()
        assert e.value.status is None

    def test_team_lookup_timeout_only_drops_that_team(self):
        client, gh, pr = make_client()
        gh.get_organization.side_effect = requests.exceptions.Timeout("read timed out")
        rules = parse_rules("*.go @org/reviewers\n*.go @dave")

        found = collect_matches(["main.go"], rules, ExpandGroups(client.group_members))

        assert aggregate(found, "alice").individuals == ["dave"]
