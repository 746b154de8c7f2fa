from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime
from enum import Enum

DEFAULT_DOCKERCFG = (
    "eyJkZXZkb2NrZXIubXVsZXNvZnQuY29tOjE4MDc4Ijp7InVzZXJuYW1lIjoiYXJtLXB1Ymxpc2hlciIsInBhc3N3b3JkIjoi"
    "QWV3Nndlczl0aGFoNHdhIiwiZW1haWwiOiJ2YWxreXJAbXVsZXNvZnQuY29tIiwiYXV0aCI6IllYSnRMWEIxWW14cGMyaGxj"
    "anBCWlhjMmQyVnpPWFJvWVdnMGQyRT0ifX0="
)

# Configuration

class ChartConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str = Field(default="core-paas-namespaces")
    version: str = Field(default="0.4.0-pre.1")
    description: str = Field(default="Chart built by helm-take-ownership")
    api_version: str = Field(default="v1")

class RegistrySecretConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str = Field(default="devdocker-registrykey")
    dockercfg: str = Field(default=DEFAULT_DOCKERCFG)

class ResourceQuotaConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    enabled: bool = Field(default=False)
    name: str = Field(default="compute-resources")
    # quota only namespaces, appended after the secret pass
    extra_namespaces: list[str] = Field(default_factory=lambda: ["default"])
    requests_cpu: str = Field(default="2")
    requests_memory: str = Field(default="8Gi")
    limits_cpu: str = Field(default="5")
    limits_memory: str = Field(default="10Gi")

    def hard(self) -> dict[str, str]:
        return {
            "requests.cpu": self.requests_cpu,
            "requests.memory": self.requests_memory,
            "limits.cpu": self.limits_cpu,
            "limits.memory": self.limits_memory,
        }

class ReleaseConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    release_name: str = Field(default="core-paas-namespaces")
    release_namespace: str = Field(default="core-paas")
    namespaces: list[str] = Field(default_factory=lambda: ["api-tooling", "design-center", "exchange"])
    info_description: str = Field(default="Transferred ownership to Helm via helm-take-ownership")
    storage_namespace: str = Field(default="kube-system")
    chart: ChartConfig = Field(default_factory=ChartConfig)
    registry_secret: RegistrySecretConfig = Field(default_factory=RegistrySecretConfig)
    resource_quota: ResourceQuotaConfig = Field(default_factory=ResourceQuotaConfig)

    def template_path(self, file: str) -> str:
        return f"{self.chart.name}/templates/{file}"

# Release records

class Template(BaseModel):
    model_config = ConfigDict(ser_json_bytes="base64", val_json_bytes="base64")

    name: str
    data: bytes

class Metadata(BaseModel):
    name: str
    version: str
    description: str = ""
    api_version: str = "v1"

class Chart(BaseModel):
    metadata: Metadata
    templates: list[Template] = Field(default_factory=list)

class StatusCode(Enum):
    UNKNOWN = "UNKNOWN"
    DEPLOYED = "DEPLOYED"
    DELETED = "DELETED"
    SUPERSEDED = "SUPERSEDED"
    FAILED = "FAILED"
    DELETING = "DELETING"
    PENDING_INSTALL = "PENDING_INSTALL"
    PENDING_UPGRADE = "PENDING_UPGRADE"
    PENDING_ROLLBACK = "PENDING_ROLLBACK"

class Status(BaseModel):
    code: StatusCode = Field(default=StatusCode.UNKNOWN)

class Info(BaseModel):
    status: Status
    first_deployed: datetime
    last_deployed: datetime
    description: str = ""

class Release(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    info: Info
    chart: Chart
    manifest: str = ""
    version: int = Field(default=1, ge=1)
    namespace: str

    @property
    def key(self) -> str:
        return make_release_key(self.name, self.version)

def make_release_key(name: str, version: int) -> str:
    return f"{name}.v{version}"
