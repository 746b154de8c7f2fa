from kubernetes import client
from ..models import Template
from .models import NAMESPACES_FILE, ManifestArguments
from .template import generate_template, render

def create_namespace_template(templates: list[Template], args: ManifestArguments, name: str) -> str:
    ns = client.V1Namespace(
        api_version="v1",
        kind="Namespace",
        metadata=client.V1ObjectMeta(
            name=name,
        ),
    )
    return generate_template(templates, args.template_path(NAMESPACES_FILE), render(ns))
