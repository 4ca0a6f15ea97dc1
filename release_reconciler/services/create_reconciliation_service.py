import logging
from enum import Enum
from typing import override

from release_reconciler.clients.github_client import GitHubClient
from release_reconciler.errors import InvalidOption
from release_reconciler.models import Option, Settings
from release_reconciler.services.service import Service
from release_reconciler.utils.action_scheduler import ActionScheduler
from release_reconciler.utils.logging import setup_logger


class CreateState(Enum):
    IDLE = "idle"
    DELETING_RELEASES = "deleting releases"
    DELETING_TAGS = "deleting tags"
    RESOLVING_ANCHOR_COMMIT = "resolving anchor commit"
    APPLYING = "applying"
    DONE = "done"


class CreateReconciliationService(Service):
    """Wipes every release and tag of the repository, then creates the given options.

    There is no rollback: if a call fails half way the repository is left as it
    is, and rerunning the command is how it gets back to the declared state.
    """

    def __init__(self, settings: Settings, options: list[Option], dry_run: bool = False):
        self.settings: Settings = settings
        self.options: list[Option] = options
        self.github: GitHubClient = GitHubClient(settings)
        self.scheduler: ActionScheduler = ActionScheduler(settings.delay_ms)
        self.logger: logging.Logger = setup_logger("CreateReconciliationService")
        self.dry_run: bool = dry_run
        self.state: CreateState = CreateState.IDLE
        self.anchor_commit: str | None = None

    @override
    def run(self) -> None:
        self.transition(CreateState.DELETING_RELEASES)
        self.delete_existing_releases()

        self.transition(CreateState.DELETING_TAGS)
        self.delete_existing_tags()

        if any(option.is_tag_option for option in self.options):
            self.transition(CreateState.RESOLVING_ANCHOR_COMMIT)
            self.resolve_anchor_commit()

        self.transition(CreateState.APPLYING)
        for option in self.options:
            if option.is_release_option:
                self.create_release(option)
            elif option.is_tag_option:
                self.create_tag(option)
            else:
                raise InvalidOption(f"Unexpected option: {option}")

        self.transition(CreateState.DONE)
        self.logger.info(f"Create run finished after {self.scheduler.performed} API calls")

    def transition(self, state: CreateState) -> None:
        self.logger.debug(f"{self.state.value} -> {state.value}")
        self.state = state

    def delete_existing_releases(self) -> None:
        owner, repo = self.settings.owner, self.settings.repo
        releases = self.scheduler.perform(lambda: self.github.list_releases(owner, repo))
        self.logger.info(f"Found {len(releases)} existing release{'s' if len(releases) != 1 else ''}: {[r.name for r in releases]}")

        for release in releases:
            if self.dry_run:
                self.logger.info(f"Dry run mode. release {release.name} with id {release.id} has not been deleted")
                continue
            self.logger.info(f"Deleting release {release.name} with id {release.id} pointed at tag {release.tag_name}")
            self.scheduler.perform(lambda: self.github.delete_release(owner, repo, release.id))

    def delete_existing_tags(self) -> None:
        owner, repo = self.settings.owner, self.settings.repo
        tags = self.scheduler.perform(lambda: self.github.list_tags(owner, repo))
        self.logger.info(f"Found {len(tags)} existing tag{'s' if len(tags) != 1 else ''}: {[t.name for t in tags]}")

        for tag in tags:
            if self.dry_run:
                self.logger.info(f"Dry run mode. tag {tag.name} has not been deleted")
                continue
            self.logger.info(f"Deleting tag {tag.name}")
            self.scheduler.perform(lambda: self.github.delete_ref(owner, repo, f"tags/{tag.name}"))

    def resolve_anchor_commit(self) -> str:
        # every tag of the run points at the same commit, so this only runs once
        if self.anchor_commit is None:
            owner, repo, branch = self.settings.owner, self.settings.repo, self.settings.default_branch
            self.anchor_commit = self.scheduler.perform(lambda: self.github.get_branch_tip_commit(owner, repo, branch))
            self.logger.info(f"Tags will point at {self.anchor_commit}, the tip of {branch}")
        return self.anchor_commit

    def create_release(self, option: Option) -> None:
        owner, repo = self.settings.owner, self.settings.repo
        if self.dry_run:
            self.logger.info(f"Dry run mode. release {option.name} on tag {option.tag} has not been created")
            return
        self.logger.info(f"Creating {'draft ' if option.draft else ''}release with name {option.name} pointed to tag {option.tag}")
        self.scheduler.perform(lambda: self.github.create_release(owner, repo, option.tag, option.name, option.draft))

    def create_tag(self, option: Option) -> None:
        owner, repo = self.settings.owner, self.settings.repo
        sha = self.resolve_anchor_commit()
        if self.dry_run:
            self.logger.info(f"Dry run mode. tag {option.tag} on {sha} has not been created")
            return
        self.logger.info(f"Creating tag with name {option.tag}")
        self.scheduler.perform(lambda: self.github.create_ref(owner, repo, f"refs/tags/{option.tag}", sha))
