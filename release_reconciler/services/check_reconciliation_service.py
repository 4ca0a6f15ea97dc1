import logging
from typing import override

from release_reconciler.clients.github_client import GitHubClient
from release_reconciler.models import CheckReport, Option, Settings
from release_reconciler.services.service import Service
from release_reconciler.utils.action_scheduler import ActionScheduler
from release_reconciler.utils.logging import setup_logger


class CheckReconciliationService(Service):
    def __init__(self, settings: Settings, options: list[Option]):
        self.settings: Settings = settings
        self.options: list[Option] = options
        self.github: GitHubClient = GitHubClient(settings)
        self.scheduler: ActionScheduler = ActionScheduler(settings.delay_ms)
        self.logger: logging.Logger = setup_logger("CheckReconciliationService")

    @override
    def run(self) -> CheckReport:
        tag_options = [o for o in self.options if o.is_tag_option]
        release_options = [o for o in self.options if o.is_release_option]

        # both lookups always run so one check reports everything that is missing
        report = CheckReport(
            missing_tags=self.check_tags(tag_options),
            missing_releases=self.check_releases(release_options),
        )
        for message in report.describe():
            self.logger.error(message)
        return report

    def check_tags(self, options: list[Option]) -> list[Option]:
        self.logger.info("Checking for the existence of the following tags:\n" + "\n".join(f"\t{o.describe()}" for o in options))
        owner, repo = self.settings.owner, self.settings.repo
        existing = {t.name for t in self.scheduler.perform(lambda: self.github.list_tags(owner, repo))}

        not_found = [o for o in options if o.tag not in existing]
        if not not_found:
            self.logger.info(f"All tags were successfully found in {self.settings.full_name}")
        return not_found

    def check_releases(self, options: list[Option]) -> list[Option]:
        self.logger.info("Checking for the existence of the following releases:\n" + "\n".join(f"\t{o.describe()}" for o in options))
        owner, repo = self.settings.owner, self.settings.repo
        existing = self.scheduler.perform(lambda: self.github.list_releases(owner, repo))

        not_found = [
            o for o in options
            if not any(r.matches(o.tag, o.name, o.draft) for r in existing)
        ]
        if not not_found:
            self.logger.info(f"All releases were successfully found in {self.settings.full_name}")
        return not_found
