from dataclasses import dataclass

from release_reconciler.errors import NoOptionsSupplied, UnsupportedCommand
from release_reconciler.models import Option, validate_options

CREATE_COMMAND = "create"
CHECK_COMMAND = "check"
SUPPORTED_COMMANDS = (CREATE_COMMAND, CHECK_COMMAND)


@dataclass(frozen=True)
class ParsedArguments:
    command: str
    options: list[Option]


def parse_arguments(command: str | None, raw_options: list[str]) -> ParsedArguments:
    """Turns the command token and raw option tokens into validated options.

    Raises UnsupportedCommand, InvalidOption or NoOptionsSupplied. Nothing here
    talks to GitHub, so a bad invocation never leaves a partial run behind.
    """
    if command not in SUPPORTED_COMMANDS:
        raise UnsupportedCommand(f"Unsupported command: {command}")

    options = [Option.parse(raw) for raw in raw_options]
    validate_options(options)

    if not options:
        raise NoOptionsSupplied("No options supplied.")

    return ParsedArguments(command=command, options=options)
