from dataclasses import dataclass, field

from .option import Option


@dataclass
class CheckReport:
    missing_tags: list[Option] = field(default_factory=list)
    missing_releases: list[Option] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return not self.missing_tags and not self.missing_releases

    def describe(self) -> list[str]:
        messages = []
        if self.missing_tags:
            formatted = "\n".join(f"\t{o.describe()}" for o in self.missing_tags)
            messages.append(f"Some expected tags were not found:\n{formatted}")
        if self.missing_releases:
            formatted = "\n".join(f"\t{o.describe()}" for o in self.missing_releases)
            messages.append(f"Some expected releases were not found:\n{formatted}")
        return messages
