from pydantic.dataclasses import dataclass

@dataclass(frozen=True)
class OptionsFile:
    options: list[str]
