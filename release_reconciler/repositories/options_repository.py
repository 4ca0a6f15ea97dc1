import os

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from release_reconciler.models import OptionsFile
from release_reconciler.utils.yaml_loader import get_yaml_instance


class OptionsRepository:
    """Reads raw option tokens declared in a YAML file.

    The file holds a single ``options`` list using the same grammar as the
    command line, e.g. ``- "rel:Beta,tag:v1.2.0,dft:true"``.
    """

    def __init__(self, file_path: str):
        self.file_path: str = file_path
        self.yaml: YAML = get_yaml_instance()

    def find_all(self) -> list[str]:
        if not os.path.isfile(self.file_path):
            raise FileNotFoundError(f"Options file not found: {self.file_path}")
        with open(self.file_path, "r") as f:
            try:
                data = self.yaml.load(f)
            except YAMLError as e:
                raise ValueError(f"Invalid options file structure: {e}") from e
            if data is None:
                return []
            try:
                parsed = OptionsFile(**data)
                return parsed.options
            except Exception as e:
                raise ValueError(f"Invalid options file structure: {e}") from e
