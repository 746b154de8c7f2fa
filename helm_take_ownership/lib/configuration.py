import os
from pydantic import ValidationError

from ..models import ReleaseConfig
from .yaml_tools import load_file

def parse_bool_env_var(var_name, default=False):
    value = os.getenv(var_name)
    if value is not None:
        value_str = str(value).lower()
        return value_str in ('true', '1') or \
               (value_str.isdigit() and int(value_str) != 0)
    return default

def load_release_config(fn: str | None = None) -> ReleaseConfig:
    if fn is None:
        return ReleaseConfig()
    if not os.path.isfile(fn):
        raise ValueError(f"Could not find file {fn}")
    data = load_file(fn) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected a mapping at the top level of {fn}")
    try:
        return ReleaseConfig.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Invalid configuration in {fn}: {e}") from e
