from pydantic import NonNegativeInt
from pydantic.dataclasses import dataclass

DEFAULT_DELAY_MS = 2_500
DEFAULT_BRANCH = "main"


@dataclass(frozen=True)
class Settings:
    owner: str
    repo: str
    token: str | None = None
    app_id: int | None = None
    installation_id: int | None = None
    private_key: str | None = None
    delay_ms: NonNegativeInt = DEFAULT_DELAY_MS
    default_branch: str = DEFAULT_BRANCH

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"
