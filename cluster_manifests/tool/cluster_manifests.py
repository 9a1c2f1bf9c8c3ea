"""Command line tool for creating cluster manifests from an asset directory."""

import argparse
import logging
import sys
import traceback

from cluster_manifests.exceptions import AssetException
from . import create, show


def _make_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Command line utility for generating cluster manifests.",
    )
    parser.add_argument(
        "--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    )

    subparsers = parser.add_subparsers(dest="command", help="Command", required=True)

    create.CreateAction.register(subparsers)
    show.ShowAction.register(subparsers)
    return parser


def main(argv: list[str] | None = None) -> None:
    """Cluster-manifests command line tool main entry point."""
    parser = _make_parser()
    args = parser.parse_args(argv)

    if args.log_level:
        logging.basicConfig(level=args.log_level)

    action = args.cls()
    try:
        action.run(**vars(args))
    except AssetException as err:
        if args.log_level == "DEBUG":
            traceback.print_exc(file=sys.stderr)
        print("cluster-manifests error: ", err, file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
