import base64
import gzip

from ..models import Release

GZIP_MAGIC = b"\x1f\x8b\x08"

# releases are stored as base64(gzip(json))
def encode_release(release: Release) -> str:
    compressed = gzip.compress(release.model_dump_json().encode('utf-8'), compresslevel=9)
    return base64.b64encode(compressed).decode('ascii')

def decode_release(data: str) -> Release:
    raw = base64.b64decode(data)
    if raw.startswith(GZIP_MAGIC):
        raw = gzip.decompress(raw)
    return Release.model_validate_json(raw)
