#!/usr/bin/env python3
import argparse
import sys

from release_reconciler.errors import ReconcilerError
from release_reconciler.repositories import OptionsRepository
from release_reconciler.services.check_reconciliation_service import CheckReconciliationService
from release_reconciler.services.create_reconciliation_service import CreateReconciliationService
from release_reconciler.utils.arguments import CREATE_COMMAND, parse_arguments
from release_reconciler.utils.logging import setup_logger
from release_reconciler.utils.settings_loader import load_settings


class ArgumentParser(argparse.ArgumentParser):
    # usage errors share exit status 1 with every other invalid invocation
    def error(self, message: str):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = ArgumentParser(description='Release and Tag Creator')
    parser.add_argument('command', nargs='?', help='create or check')
    parser.add_argument('options', nargs='*', help='tag:<name>, rel:<name> and dft:<true|false> parts joined by commas')
    parser.add_argument('--options-file', help='YAML file with an "options" list, appended to the command line options')
    parser.add_argument('--dry-run', action='store_true', help='Run create in dry-run mode without making any changes')
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_intermixed_args(argv)
    logger = setup_logger("ReleaseTagCreator")

    try:
        raw_options = list(args.options)
        if args.options_file:
            raw_options += OptionsRepository(args.options_file).find_all()
        parsed = parse_arguments(args.command, raw_options)
        settings = load_settings()
    except (ReconcilerError, ValueError, OSError) as e:
        logger.error(str(e))
        return 1

    logger.info(f"Operating on repo {settings.full_name}")
    try:
        if parsed.command == CREATE_COMMAND:
            CreateReconciliationService(settings, parsed.options, dry_run=args.dry_run).run()
            logger.info("Create run completed successfully")
            return 0

        if args.dry_run:
            logger.info("Check never changes the repository, --dry-run has no effect")
        report = CheckReconciliationService(settings, parsed.options).run()
        if not report.passed:
            logger.error(f"Check failed for {settings.full_name}")
            return 1
        logger.info("Check completed successfully")
        return 0
    except Exception as e:
        logger.error(f"{parsed.command} run failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
