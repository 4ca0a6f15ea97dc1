import os
from typing import Mapping

from pydantic import ValidationError

from release_reconciler.errors import ConfigurationError
from release_reconciler.models import Settings
from release_reconciler.models.settings import DEFAULT_BRANCH, DEFAULT_DELAY_MS


def _split_full_name(full_name: str | None) -> tuple[str | None, str | None]:
    if not full_name or "/" not in full_name:
        return None, None
    owner, repo = full_name.split("/", 1)
    return owner or None, repo or None


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    env = os.environ if environ is None else environ

    owner = env.get("OWNER")
    repo = env.get("REPO")
    # explicit OWNER/REPO are never mixed with the workflow repository
    if not owner and not repo:
        owner, repo = _split_full_name(env.get("INPUT_REPO") or env.get("GITHUB_REPOSITORY"))
    if not owner:
        raise ConfigurationError("No owner supplied as an env variable")
    if not repo:
        raise ConfigurationError("No repo supplied as an env variable")

    token = env.get("TOKEN")
    app_id = env.get("GITHUB_APP_ID")
    install_id = env.get("GITHUB_APP_INSTALLATION_ID")
    private_key = env.get("GITHUB_APP_PRIVATE_KEY")
    if not token and not (app_id and install_id and private_key):
        raise ConfigurationError("No token supplied as an env variable")

    try:
        return Settings(
            owner=owner,
            repo=repo,
            token=token or None,
            app_id=app_id if not token else None,
            installation_id=install_id if not token else None,
            private_key=private_key if not token else None,
            delay_ms=env.get("API_DELAY_MS") or DEFAULT_DELAY_MS,
            default_branch=env.get("DEFAULT_BRANCH") or DEFAULT_BRANCH,
        )
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e
