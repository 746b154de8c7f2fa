from datetime import datetime, timezone
import logging

from .models import Chart, Info, Metadata, Release, ReleaseConfig, Status, StatusCode, Template
from .create_manifests import build_templates

logger = logging.getLogger(__name__)


def now() -> datetime:
    return datetime.now(timezone.utc)

def build_release_info(config: ReleaseConfig) -> Info:
    return Info(
        status=Status(code=StatusCode.DEPLOYED),
        first_deployed=now(),
        last_deployed=now(),
        description=config.info_description,
    )

def build_release_chart(templates: list[Template], config: ReleaseConfig) -> Chart:
    return Chart(
        metadata=Metadata(
            name=config.chart.name,
            version=config.chart.version,
            description=config.chart.description,
            api_version=config.chart.api_version,
        ),
        templates=templates,
    )

def build_release(name: str, config: ReleaseConfig | None = None) -> Release:
    """
        Builds revision 1 of a deployed release adopting the configured namespaces.
        The release namespace is taken from the configuration, never from the name.
    """
    config = config or ReleaseConfig()
    templates, manifest = build_templates(config)
    release = Release(
        name=name,
        info=build_release_info(config),
        chart=build_release_chart(templates, config),
        manifest=manifest,
        version=1,
        namespace=config.release_namespace,
    )
    logger.debug("Built release %s with %d templates", release.key, len(templates))
    return release
