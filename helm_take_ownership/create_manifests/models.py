from dataclasses import dataclass
from ..models import ReleaseConfig

NAMESPACES_FILE = 'namespaces.yaml'
REGISTRY_SECRET_FILE = 'docker-registry-secret.yaml'
RESOURCE_QUOTAS_FILE = 'resource-quotas.yaml'

@dataclass
class ManifestArguments:
    config: ReleaseConfig

    def template_path(self, file: str) -> str:
        return self.config.template_path(file)
