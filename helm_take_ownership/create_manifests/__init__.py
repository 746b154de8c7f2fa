from ..models import ReleaseConfig, Template
from .models import ManifestArguments
from .namespace import create_namespace_template
from .secret import create_secret_template
from .resource_quota import create_resource_quota_template

import logging

logger = logging.getLogger(__name__)


def build_templates(config: ReleaseConfig) -> tuple[list[Template], str]:
    args = ManifestArguments(config=config)
    templates: list[Template] = []
    manifest = ''

    namespaces = list(config.namespaces)
    for name in namespaces:
        manifest += create_namespace_template(templates, args, name)

    # the release namespace gets a registry secret but is not created by the chart
    namespaces.append(config.release_namespace)
    for name in namespaces:
        manifest += create_secret_template(templates, args, name)

    if config.resource_quota.enabled:
        namespaces += config.resource_quota.extra_namespaces
        for name in namespaces:
            manifest += create_resource_quota_template(templates, args, name)

    logger.debug("Rendered %d templates for chart %s", len(templates), config.chart.name)
    return templates, manifest
