from typing import Any
from kubernetes import client
from ..models import Template
from ..lib.yaml_tools import dump_manifest

def render(obj: Any) -> str:
    return dump_manifest(client.ApiClient().sanitize_for_serialization(obj))

# records the template and returns its manifest section
def generate_template(templates: list[Template], filename: str, content: str) -> str:
    templates.append(Template(name=filename, data=content.encode('utf-8')))
    return f"\n---\n# Source: {filename}\n{content}"
