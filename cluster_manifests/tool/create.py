"""Cluster-manifests create action."""

from argparse import (
    ArgumentParser,
    _SubParsersAction as SubParsersAction,
)
import logging
import pathlib
from typing import cast

from cluster_manifests.asset import (
    DiskFileFetcher,
    ResolveMode,
    WritableAsset,
    resolve,
    write_files,
)
from cluster_manifests.bootkube import TemplateAsset
from cluster_manifests.config import AssetsConfig
from cluster_manifests.exceptions import InputException
from cluster_manifests.installconfig.types import InstallConfig
from cluster_manifests.manifests import Manifests
from cluster_manifests.manifests.config_asset import ConfigAsset


_LOGGER = logging.getLogger(__name__)


def _read_install_config(path: pathlib.Path) -> InstallConfig:
    try:
        content = path.read_bytes()
    except OSError as err:
        raise InputException(f"Unable to read install config {path}: {err}") from err
    return InstallConfig.parse_yaml(content)


class CreateManifestsAction:
    """Create the manifests in an asset directory."""

    @classmethod
    def register(
        cls, subparsers: SubParsersAction  # type: ignore[type-arg]
    ) -> ArgumentParser:
        """Register the subparser commands."""
        args = cast(
            ArgumentParser,
            subparsers.add_parser(
                "manifests",
                help="Generate the manifests and write them to the asset directory",
                description="""Generates the Kubernetes manifests for the cluster,
                    reusing any assets already present in the asset directory.""",
            ),
        )
        args.add_argument(
            "--dir",
            dest="directory",
            type=pathlib.Path,
            default=pathlib.Path("."),
            help="Asset directory to load from and write to",
        )
        args.add_argument(
            "--install-config",
            type=pathlib.Path,
            default=None,
            help="Install config to use when none exists in the asset directory",
        )
        args.add_argument(
            "--template-dir",
            type=pathlib.Path,
            default=None,
            help="Directory of manifest templates overriding the bundled ones",
        )
        args.set_defaults(cls=cls)
        return args

    def run(  # type: ignore[no-untyped-def]
        self,
        directory: pathlib.Path,
        install_config: pathlib.Path | None,
        template_dir: pathlib.Path | None,
        **kwargs,  # pylint: disable=unused-argument
    ) -> None:
        """Action implementation."""
        config = AssetsConfig(
            directory=directory,
            install_config=(
                _read_install_config(install_config) if install_config else None
            ),
            template_dir=template_dir,
        )
        resolved = resolve(
            [Manifests],
            config,
            fetcher=DiskFileFetcher(directory),
            mode=ResolveMode.LOAD,
        )
        count = 0
        for asset in resolved.values():
            # Manifests writes the rendered templates and config manifests
            if not isinstance(asset, WritableAsset) or isinstance(
                asset, (TemplateAsset, ConfigAsset)
            ):
                continue
            files = asset.files()
            write_files(directory, files)
            count += len(files)
        _LOGGER.info("Wrote %d files to %s", count, directory)


class CreateAction:
    """Cluster-manifests create action."""

    @classmethod
    def register(
        cls, subparsers: SubParsersAction  # type: ignore[type-arg]
    ) -> ArgumentParser:
        """Register the subparser commands."""
        args: ArgumentParser = subparsers.add_parser(
            "create",
            help="Create assets in an asset directory",
        )
        subcmds = args.add_subparsers(
            title="Available commands",
            required=True,
        )
        CreateManifestsAction.register(subcmds)
        args.set_defaults(cls=cls)
        return args

    def run(  # type: ignore[no-untyped-def]
        self,
        **kwargs,  # pylint: disable=unused-argument
    ) -> None:
        """Action implementation."""
        # No-op given subcommands are dispatched
