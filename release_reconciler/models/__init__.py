from .check_report import CheckReport
from .option import Option, validate_options
from .remote_release import RemoteRelease
from .remote_tag import RemoteTag
from .settings import Settings
from .wrappers import OptionsFile

__all__ = [
    "CheckReport",
    "Option",
    "OptionsFile",
    "RemoteRelease",
    "RemoteTag",
    "Settings",
    "validate_options",
]
