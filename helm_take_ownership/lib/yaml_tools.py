from typing import Any
import yaml

class NoAliasDumper(yaml.SafeDumper):
    def ignore_aliases(self, data):
        return True

def load_file(fn) -> Any:
    with open(fn, 'r') as f:
        return yaml.safe_load(f)

def dump_manifest(manifest: dict[str, Any]) -> str:
    """
        dumps a single kubernetes object as a block style yaml document.
        the trailing newline is dropped so documents can be joined with separators.
    """
    return yaml.dump(manifest, default_flow_style=False, Dumper=NoAliasDumper).rstrip('\n')
