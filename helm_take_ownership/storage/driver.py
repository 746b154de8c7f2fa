from datetime import datetime, timezone
from typing import Protocol
import logging

from kubernetes import client
from kubernetes.client.rest import ApiException
from urllib3.exceptions import HTTPError

from ..errors import ReleaseExistsError, ReleaseNotFoundError, StorageDriverError
from ..models import Release
from .codec import decode_release, encode_release

logger = logging.getLogger(__name__)

OWNER = 'TILLER'


class Driver(Protocol):
    name: str

    def create(self, key: str, release: Release) -> None: ...

    def get(self, key: str) -> Release: ...


def new_release_labels(release: Release) -> dict[str, str]:
    return {
        'NAME': release.name,
        'OWNER': OWNER,
        'STATUS': release.info.status.code.value,
        'VERSION': str(release.version),
    }


class ConfigMaps:
    """Stores releases as ConfigMaps, one object per release revision."""

    name = 'ConfigMap'

    def __init__(self, core_v1_api: client.CoreV1Api, namespace: str):
        self.core_v1_api = core_v1_api
        self.namespace = namespace

    def new_config_map(self, key: str, release: Release) -> client.V1ConfigMap:
        labels = new_release_labels(release)
        labels['CREATED_AT'] = str(int(datetime.now(timezone.utc).timestamp()))
        return client.V1ConfigMap(
            api_version="v1",
            kind="ConfigMap",
            metadata=client.V1ObjectMeta(
                name=key,
                labels=labels,
            ),
            data={'release': encode_release(release)},
        )

    def create(self, key: str, release: Release) -> None:
        body = self.new_config_map(key, release)
        try:
            self.core_v1_api.create_namespaced_config_map(namespace=self.namespace, body=body)
        except ApiException as e:
            if e.status == 409:
                raise ReleaseExistsError(key) from e
            logger.error("create: failed to create: %s", e.reason)
            raise StorageDriverError(f"create: failed to create {key}: {e.status} {e.reason}") from e
        except HTTPError as e:
            logger.error("create: failed to create: %s", e)
            raise StorageDriverError(f"create: failed to create {key}: {e}") from e

    def get(self, key: str) -> Release:
        try:
            config_map = self.core_v1_api.read_namespaced_config_map(name=key, namespace=self.namespace)
        except ApiException as e:
            if e.status == 404:
                raise ReleaseNotFoundError(key) from e
            logger.error('get: failed to get "%s": %s', key, e.reason)
            raise StorageDriverError(f"get: failed to get {key}: {e.status} {e.reason}") from e
        data = (config_map.data or {}).get('release')
        if data is None:
            raise StorageDriverError(f"get: {key} has no release data")
        return decode_release(data)


class Memory:
    name = 'Memory'

    def __init__(self):
        self._releases: dict[str, Release] = {}

    def create(self, key: str, release: Release) -> None:
        if key in self._releases:
            raise ReleaseExistsError(key)
        self._releases[key] = release

    def get(self, key: str) -> Release:
        if key not in self._releases:
            raise ReleaseNotFoundError(key)
        return self._releases[key]

    def keys(self) -> list[str]:
        return list(self._releases.keys())
