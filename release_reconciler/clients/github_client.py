import logging
from github import Auth, Github, GithubIntegration, Repository

from release_reconciler.models import RemoteRelease, RemoteTag, Settings

logger = logging.getLogger(__name__)


class GitHubClient:
    def __init__(self, settings: Settings):
        if settings.token:
            self.client: Github = Github(auth=Auth.Token(settings.token))
        elif settings.app_id and settings.installation_id and settings.private_key:
            integration = GithubIntegration(settings.app_id, settings.private_key)
            token = integration.get_access_token(settings.installation_id).token
            self.client = Github(auth=Auth.Token(token))
        else:
            logger.error("GitHub credentials are mandatory")
            raise EnvironmentError("Missing GitHub credentials")
        self._repos: dict[str, Repository.Repository] = {}

    def get_repo(self, owner: str, repo: str) -> Repository.Repository:
        full_name = f"{owner}/{repo}"
        if full_name not in self._repos:
            self._repos[full_name] = self.client.get_repo(full_name, lazy=True)
        return self._repos[full_name]

    def list_releases(self, owner: str, repo: str) -> list[RemoteRelease]:
        return [
            RemoteRelease(id=r.id, name=r.title, tag_name=r.tag_name, draft=r.draft)
            for r in self.get_repo(owner, repo).get_releases()
        ]

    def list_tags(self, owner: str, repo: str) -> list[RemoteTag]:
        return [
            RemoteTag(name=t.name, commit_sha=t.commit.sha)
            for t in self.get_repo(owner, repo).get_tags()
        ]

    def delete_release(self, owner: str, repo: str, release_id: int) -> None:
        self.get_repo(owner, repo).get_release(release_id).delete_release()

    def delete_ref(self, owner: str, repo: str, ref: str) -> None:
        self.get_repo(owner, repo).get_git_ref(ref).delete()

    def create_release(self, owner: str, repo: str, tag_name: str | None, name: str, draft: bool) -> None:
        # GitHub rejects a release without a tag; let it say so
        self.get_repo(owner, repo).create_git_release(tag=tag_name or "", name=name, message="", draft=draft)

    def create_ref(self, owner: str, repo: str, ref: str, sha: str) -> None:
        self.get_repo(owner, repo).create_git_ref(ref=ref, sha=sha)

    def get_branch_tip_commit(self, owner: str, repo: str, branch: str = "main") -> str:
        return self.get_repo(owner, repo).get_branch(branch).commit.sha
