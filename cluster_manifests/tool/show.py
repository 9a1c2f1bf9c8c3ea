"""Cluster-manifests show action."""

from argparse import (
    ArgumentParser,
    _SubParsersAction as SubParsersAction,
)
import pathlib
import sys
from typing import cast

from cluster_manifests.asset import DiskFileFetcher
from cluster_manifests.exceptions import InputException
from cluster_manifests.manifests import Manifests

from .format import PrintFormatter


class ShowManifestsAction:
    """Show the manifests from a previous run."""

    @classmethod
    def register(
        cls, subparsers: SubParsersAction  # type: ignore[type-arg]
    ) -> ArgumentParser:
        """Register the subparser commands."""
        args = cast(
            ArgumentParser,
            subparsers.add_parser(
                "manifests",
                help="List the manifests in the asset directory",
                description="Print the manifests written by a previous create run",
            ),
        )
        args.add_argument(
            "--dir",
            dest="directory",
            type=pathlib.Path,
            default=pathlib.Path("."),
            help="Asset directory to load from",
        )
        args.set_defaults(cls=cls)
        return args

    def run(  # type: ignore[no-untyped-def]
        self,
        directory: pathlib.Path,
        **kwargs,  # pylint: disable=unused-argument
    ) -> None:
        """Action implementation."""
        manifests = Manifests()
        if not manifests.load(DiskFileFetcher(directory)):
            raise InputException(f"No manifests found in {directory}")
        PrintFormatter(["filename", "size"]).print(
            [{"filename": f.filename, "size": len(f.data)} for f in manifests.files()],
            file=sys.stdout,
        )


class ShowAction:
    """Cluster-manifests show action."""

    @classmethod
    def register(
        cls, subparsers: SubParsersAction  # type: ignore[type-arg]
    ) -> ArgumentParser:
        """Register the subparser commands."""
        args: ArgumentParser = subparsers.add_parser(
            "show",
            help="Show assets from an asset directory",
        )
        subcmds = args.add_subparsers(
            title="Available commands",
            required=True,
        )
        ShowManifestsAction.register(subcmds)
        args.set_defaults(cls=cls)
        return args

    def run(  # type: ignore[no-untyped-def]
        self,
        **kwargs,  # pylint: disable=unused-argument
    ) -> None:
        """Action implementation."""
        # No-op given subcommands are dispatched
