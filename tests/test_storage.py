import base64
import gzip
from unittest.mock import MagicMock

import pytest
from kubernetes import client
from kubernetes.client.rest import ApiException
from urllib3.exceptions import MaxRetryError

from helm_take_ownership.errors import ReleaseExistsError, ReleaseNotFoundError, StorageDriverError
from helm_take_ownership.release import build_release
from helm_take_ownership.storage import ConfigMaps, Memory, Storage
from helm_take_ownership.storage.codec import decode_release, encode_release


@pytest.fixture
def release():
    return build_release('core-paas-namespaces')


def test_codec_restores_release(release):
    encoded = encode_release(release)

    assert gzip.decompress(base64.b64decode(encoded)).startswith(b'{')
    assert decode_release(encoded) == release


def test_codec_accepts_uncompressed_payload(release):
    plain = base64.b64encode(release.model_dump_json().encode()).decode()

    assert decode_release(plain) == release


def test_memory_driver_rejects_duplicate_key(release):
    storage = Storage(Memory())
    storage.create(release)

    with pytest.raises(ReleaseExistsError):
        storage.create(release)
    assert storage.get('core-paas-namespaces', 1) == release


def test_memory_driver_missing_release():
    with pytest.raises(ReleaseNotFoundError):
        Storage(Memory()).get('nothing', 1)


def test_config_map_driver_writes_release(release):
    api = MagicMock()
    Storage(ConfigMaps(api, 'kube-system')).create(release)

    api.create_namespaced_config_map.assert_called_once()
    kwargs = api.create_namespaced_config_map.call_args.kwargs
    assert kwargs['namespace'] == 'kube-system'
    body = kwargs['body']
    assert body.metadata.name == 'core-paas-namespaces.v1'
    labels = body.metadata.labels
    assert labels['NAME'] == 'core-paas-namespaces'
    assert labels['OWNER'] == 'TILLER'
    assert labels['STATUS'] == 'DEPLOYED'
    assert labels['VERSION'] == '1'
    assert labels['CREATED_AT'].isdigit()
    assert decode_release(body.data['release']) == release


def test_config_map_driver_conflict_is_release_exists(release):
    api = MagicMock()
    api.create_namespaced_config_map.side_effect = ApiException(status=409, reason='Conflict')

    with pytest.raises(ReleaseExistsError) as e:
        ConfigMaps(api, 'kube-system').create(release.key, release)
    assert e.value.key == 'core-paas-namespaces.v1'


def test_config_map_driver_other_api_errors(release):
    api = MagicMock()
    api.create_namespaced_config_map.side_effect = ApiException(status=500, reason='Internal Server Error')

    with pytest.raises(StorageDriverError) as e:
        ConfigMaps(api, 'kube-system').create(release.key, release)
    assert not isinstance(e.value, ReleaseExistsError)


def test_config_map_driver_unreachable_cluster(release):
    api = MagicMock()
    api.create_namespaced_config_map.side_effect = MaxRetryError(None, '/api/v1', 'connection refused')

    with pytest.raises(StorageDriverError):
        ConfigMaps(api, 'kube-system').create(release.key, release)


def test_config_map_driver_get(release):
    api = MagicMock()
    api.read_namespaced_config_map.return_value = client.V1ConfigMap(data={'release': encode_release(release)})

    assert ConfigMaps(api, 'kube-system').get('core-paas-namespaces.v1') == release
    api.read_namespaced_config_map.assert_called_once_with(name='core-paas-namespaces.v1', namespace='kube-system')


def test_config_map_driver_get_missing():
    api = MagicMock()
    api.read_namespaced_config_map.side_effect = ApiException(status=404, reason='Not Found')

    with pytest.raises(ReleaseNotFoundError):
        ConfigMaps(api, 'kube-system').get('core-paas-namespaces.v1')
