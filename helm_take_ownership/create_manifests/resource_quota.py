from kubernetes import client
from ..models import Template
from .models import RESOURCE_QUOTAS_FILE, ManifestArguments
from .template import generate_template, render

def create_resource_quota_template(templates: list[Template], args: ManifestArguments, namespace: str) -> str:
    quota_config = args.config.resource_quota
    quota = client.V1ResourceQuota(
        api_version="v1",
        kind="ResourceQuota",
        metadata=client.V1ObjectMeta(
            name=quota_config.name,
            namespace=namespace,
        ),
        spec=client.V1ResourceQuotaSpec(
            hard=quota_config.hard(),
        ),
    )
    return generate_template(templates, args.template_path(RESOURCE_QUOTAS_FILE), render(quota))
