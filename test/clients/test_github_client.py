from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from release_reconciler.clients.github_client import GitHubClient
from release_reconciler.models import RemoteRelease, RemoteTag, Settings

class DummyIntegration:
    def __init__(self, app_id, private_key):
        pass
    def get_access_token(self, installation_id):
        class Token:
            token = "fake-token"
        return Token()

@pytest.fixture
def client():
    client = GitHubClient(Settings(owner="org", repo="repo", token="fake-token"))
    client.client = MagicMock()
    return client

@pytest.fixture
def gh_repo(client):
    gh_repo = MagicMock()
    client.client.get_repo.return_value = gh_repo
    return gh_repo


def test_github_client_with_app_credentials(monkeypatch):
    monkeypatch.setattr("release_reconciler.clients.github_client.GithubIntegration", DummyIntegration)
    client = GitHubClient(Settings(owner="org", repo="repo", app_id=123, installation_id=456, private_key="---KEY---"))
    assert client.client is not None


def test_missing_credentials():
    with pytest.raises(EnvironmentError):
        GitHubClient(Settings(owner="org", repo="repo"))


def test_get_repo_is_cached(client, gh_repo):
    assert client.get_repo("org", "repo") is gh_repo
    assert client.get_repo("org", "repo") is gh_repo
    client.client.get_repo.assert_called_once_with("org/repo", lazy=True)


def test_list_releases(client, gh_repo):
    gh_repo.get_releases.return_value = [
        SimpleNamespace(id=1, title="Beta", tag_name="v1.2.0", draft=True),
        SimpleNamespace(id=2, title="Stable", tag_name="v1.1.0", draft=False),
    ]
    assert client.list_releases("org", "repo") == [
        RemoteRelease(id=1, name="Beta", tag_name="v1.2.0", draft=True),
        RemoteRelease(id=2, name="Stable", tag_name="v1.1.0", draft=False),
    ]


def test_list_tags(client, gh_repo):
    gh_repo.get_tags.return_value = [SimpleNamespace(name="v1.0.0", commit=SimpleNamespace(sha="abc123"))]
    assert client.list_tags("org", "repo") == [RemoteTag(name="v1.0.0", commit_sha="abc123")]


def test_delete_release(client, gh_repo):
    client.delete_release("org", "repo", 42)
    gh_repo.get_release.assert_called_once_with(42)
    gh_repo.get_release.return_value.delete_release.assert_called_once()


def test_delete_ref(client, gh_repo):
    client.delete_ref("org", "repo", "tags/v1.0.0")
    gh_repo.get_git_ref.assert_called_once_with("tags/v1.0.0")
    gh_repo.get_git_ref.return_value.delete.assert_called_once()


def test_create_release(client, gh_repo):
    client.create_release("org", "repo", "v1.2.0", "Beta", True)
    gh_repo.create_git_release.assert_called_once_with(tag="v1.2.0", name="Beta", message="", draft=True)


def test_create_ref(client, gh_repo):
    client.create_ref("org", "repo", "refs/tags/v1.0.0", "abc123")
    gh_repo.create_git_ref.assert_called_once_with(ref="refs/tags/v1.0.0", sha="abc123")


def test_get_branch_tip_commit(client, gh_repo):
    gh_repo.get_branch.return_value = SimpleNamespace(commit=SimpleNamespace(sha="tip_sha"))
    assert client.get_branch_tip_commit("org", "repo", "main") == "tip_sha"
    gh_repo.get_branch.assert_called_once_with("main")


def test_remote_errors_propagate(client, gh_repo):
    gh_repo.create_git_ref.side_effect = Exception("Reference already exists")
    with pytest.raises(Exception, match="Reference already exists"):
        client.create_ref("org", "repo", "refs/tags/v1.0.0", "abc123")
