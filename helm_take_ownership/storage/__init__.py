import logging

from ..models import Release, make_release_key
from .driver import ConfigMaps, Driver, Memory

logger = logging.getLogger(__name__)


class Storage:
    def __init__(self, driver: Driver):
        self.driver = driver

    def create(self, release: Release) -> None:
        key = release.key
        logger.info('creating release "%s"', key)
        self.driver.create(key, release)

    def get(self, name: str, version: int) -> Release:
        key = make_release_key(name, version)
        logger.debug('getting release "%s"', key)
        return self.driver.get(key)


__all__ = ['Storage', 'Driver', 'ConfigMaps', 'Memory']
