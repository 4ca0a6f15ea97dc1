from pydantic.dataclasses import dataclass

from release_reconciler.errors import InvalidOption

PART_SEPARATOR = ","
KEY_SEPARATOR = ":"
# option part key -> Option field
PART_KEYS = {"tag": "tag", "rel": "name", "dft": "draft"}


@dataclass(frozen=True)
class Option:
    tag: str | None = None
    name: str | None = None
    draft: bool = False

    @property
    def is_tag_option(self) -> bool:
        return bool(self.tag) and not self.name and not self.draft

    @property
    def is_release_option(self) -> bool:
        return bool(self.name)

    @classmethod
    def parse(cls, raw: str) -> "Option":
        """Builds an option from a ``key:value[,key:value...]`` token.

        Parts may come in any order; the first occurrence of each field wins.
        Classification is not checked here, see ``validate_options``.
        """
        fields: dict[str, str | bool] = {}
        for part in raw.split(PART_SEPARATOR):
            key, separator, value = part.partition(KEY_SEPARATOR)
            if not separator:
                raise InvalidOption(f"Malformed option part: {part!r} in {raw!r}")
            field = PART_KEYS.get(key)
            if field is None:
                raise InvalidOption(f"Unexpected option part: {part}")
            if field == "draft":
                fields.setdefault(field, value == "true")
            else:
                fields.setdefault(field, value)
        return cls(**fields)

    def describe(self) -> str:
        if self.is_release_option:
            return f"Name: {self.name} Tag: {self.tag} Draft: {self.draft}"
        return f"Tag: {self.tag}"


def validate_options(options: list[Option]) -> None:
    for option in options:
        if not option.is_tag_option and not option.is_release_option:
            raise InvalidOption(
                f"Expected option to be either a tag or release option, got {option}"
            )
