from pydantic.dataclasses import dataclass

@dataclass(frozen=True)
class RemoteRelease:
    id: int
    name: str | None
    tag_name: str
    draft: bool

    def matches(self, tag: str | None, name: str | None, draft: bool) -> bool:
        return self.tag_name == tag and self.name == name and self.draft == draft
