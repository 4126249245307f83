"""
Command line interface: `bruh install|uninstall|sync|build`.
"""

import argparse
import logging
import pathlib
import sys
from typing import List, Optional

from homebruh import __version__
from homebruh.bruh_config import BruhConfig
from homebruh.bruh_exceptions import BruhException
from homebruh.bruh_logger import BruhLogger
from homebruh.package_builder import PackageBuilder
from homebruh.package_downloader import Fetcher, PackageDownloader
from homebruh.package_lifecycle import LifecycleEngine
from homebruh.package_lifecycle.lifecycle import package_name_from_file
from homebruh.package_store import ContentStore
from homebruh.package_sync import CatalogSynchronizer

PROG = "bruh"


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="A minimal package manager.",
    )
    parser.add_argument("--version", action="version", version=f"{PROG} {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output.")
    subparsers = parser.add_subparsers(dest="command", metavar="<command>")

    build = subparsers.add_parser("build", help="Builds the package referring to `bruh.toml`.")
    build.add_argument("directory", nargs="?", default=".", help="Directory holding bruh.toml.")

    install = subparsers.add_parser(
        "install", help="Installs the specified package from the sources, or a package file with -i."
    )
    install.add_argument("-i", dest="from_file", action="store_true", help="Install a local package file.")
    install.add_argument("package")

    uninstall = subparsers.add_parser("uninstall", help="Uninstalls the specified package.")
    uninstall.add_argument("-i", dest="from_file", action="store_true", help="Uninstall by package file name.")
    uninstall.add_argument("package")

    subparsers.add_parser("sync", help="Synchronizes community database.")
    return parser


def create_engine(config: BruhConfig, logger: BruhLogger) -> LifecycleEngine:
    store = ContentStore(config)
    fetcher = Fetcher(logger, timeout=config.request_timeout)
    return LifecycleEngine(store, PackageDownloader(store, fetcher, logger), logger)


def run(args: argparse.Namespace, config: BruhConfig, logger: BruhLogger) -> None:
    if args.command == "build":
        PackageBuilder(logger).build(pathlib.Path(args.directory))
    elif args.command == "install":
        engine = create_engine(config, logger)
        if args.from_file:
            engine.install_from_file(args.package)
        else:
            engine.install_remote(args.package)
    elif args.command == "uninstall":
        engine = create_engine(config, logger)
        name = package_name_from_file(args.package) if args.from_file else args.package
        engine.uninstall(name)
    elif args.command == "sync":
        store = ContentStore(config)
        fetcher = Fetcher(logger, timeout=config.request_timeout)
        CatalogSynchronizer(config, store, fetcher, logger).sync()


def main(argv: Optional[List[str]] = None, config: Optional[BruhConfig] = None) -> int:
    parser = create_parser()
    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help()
        return 0

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
        stream=sys.stderr,
    )
    config = config or BruhConfig.from_env()
    logger = BruhLogger()

    try:
        run(args, config, logger)
    except BruhException as e:
        print(f"error: {e.message}", file=sys.stderr)
        return 1
    return 0
