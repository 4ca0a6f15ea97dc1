from ruamel.yaml import YAML

def get_yaml_instance() -> YAML:
    yaml = YAML(typ="safe")
    yaml.default_flow_style = False
    return yaml
