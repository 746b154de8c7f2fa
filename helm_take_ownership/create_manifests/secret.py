from kubernetes import client
from ..models import Template
from .models import REGISTRY_SECRET_FILE, ManifestArguments
from .template import generate_template, render

def create_secret_template(templates: list[Template], args: ManifestArguments, namespace: str) -> str:
    registry_secret = args.config.registry_secret
    # dockercfg is already base64, it goes into data untouched
    secret = client.V1Secret(
        api_version="v1",
        kind="Secret",
        type="kubernetes.io/dockercfg",
        metadata=client.V1ObjectMeta(
            name=registry_secret.name,
            namespace=namespace,
        ),
        data={".dockercfg": registry_secret.dockercfg},
    )
    return generate_template(templates, args.template_path(REGISTRY_SECRET_FILE), render(secret))
