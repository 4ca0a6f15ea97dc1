from pydantic.dataclasses import dataclass

@dataclass(frozen=True)
class RemoteTag:
    name: str
    commit_sha: str
