import argparse, logging, sys

from .lib.configuration import parse_bool_env_var, load_release_config
from .kube import new_core_v1_api
from .models import ReleaseConfig
from .release import build_release
from .storage import ConfigMaps, Storage

DEBUG = parse_bool_env_var('DEBUG')

logger = logging.getLogger('helm_take_ownership')


def install(config: ReleaseConfig, storage: Storage) -> None:
    logger.info("Constructing Helm Release...")
    release = build_release(config.release_name, config)

    logger.info("Installing Helm Chart...")
    storage.create(release)
    logger.info("Release %s is now owned by Helm", release.key)


def main(argv=None):
    parser = argparse.ArgumentParser(prog='helm-take-ownership')
    parser.add_argument('--config', help='yaml file overriding the release configuration')
    parser.add_argument('--kubeconfig', help='path to the kubeconfig file')
    parser.add_argument('--context', help='kubeconfig context to use')
    parser.add_argument('--dry-run', action='store_true', help='print the release manifest instead of installing it')
    parser.add_argument('-v', '--verbose', action='store_true')
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose or DEBUG else logging.INFO,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )

    config = load_release_config(args.config)

    if args.dry_run:
        release = build_release(config.release_name, config)
        print(release.manifest.lstrip('\n'))
        return

    core_v1_api = new_core_v1_api(args.kubeconfig, args.context)
    storage = Storage(ConfigMaps(core_v1_api, config.storage_namespace))
    install(config, storage)


def run():
    if DEBUG:
        main()
    else:
        try:
            main()
        # discard stack trace
        except Exception as e:
            logger.error("%s: %s", type(e).__name__, e)
            sys.exit(1)


if __name__ == '__main__':
    run()
