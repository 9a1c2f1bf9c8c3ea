"""Tests for the asset resolver."""

from collections import Counter
from typing import Any

import pytest

from cluster_manifests.asset import (
    Asset,
    AssetResolver,
    File,
    FileFetcher,
    InMemoryFileFetcher,
    Parents,
    ResolveMode,
    WritableAsset,
    resolve,
)
from cluster_manifests.config import AssetsConfig
from cluster_manifests.exceptions import AssetException, ResolutionError, TemplateFault

GENERATED: Counter[str] = Counter()
ORDER: list[str] = []


@pytest.fixture(autouse=True)
def reset_counters() -> None:
    """Clear the record of generated assets between tests."""
    GENERATED.clear()
    ORDER.clear()


class RecordingAsset(Asset):
    """Records each generate call."""

    deps: list[type[Asset]] = []

    def __init__(self) -> None:
        self.parents: dict[type[Asset], Any] = {}

    def dependencies(self) -> list[type[Asset]]:
        return list(self.deps)

    def generate(self, parents: Parents) -> None:
        GENERATED[self.name] += 1
        ORDER.append(self.name)
        self.parents = {dep: parents.get(dep) for dep in self.deps}


class Leaf(RecordingAsset):
    name = "Leaf"


class Left(RecordingAsset):
    name = "Left"
    deps = [Leaf]


class Right(RecordingAsset):
    name = "Right"
    deps = [Leaf]


class Top(RecordingAsset):
    name = "Top"
    deps = [Left, Right, Leaf]


class Broken(RecordingAsset):
    name = "Broken"

    def generate(self, parents: Parents) -> None:
        raise ValueError("boom")


class DependsOnBroken(RecordingAsset):
    name = "Depends On Broken"
    deps = [Leaf, Broken]


class Faulty(RecordingAsset):
    name = "Faulty"

    def generate(self, parents: Parents) -> None:
        raise TemplateFault("bad template")


class CycleA(RecordingAsset):
    name = "Cycle A"

    def dependencies(self) -> list[type[Asset]]:
        return [CycleB]


class CycleB(RecordingAsset):
    name = "Cycle B"
    deps = [CycleA]


class Stored(WritableAsset):
    """A writable asset that records whether it was loaded."""

    name = "Stored"

    def __init__(self) -> None:
        self.value = b""
        self.loaded = False

    def dependencies(self) -> list[type[Asset]]:
        return [Leaf]

    def generate(self, parents: Parents) -> None:
        GENERATED[self.name] += 1
        self.value = b"generated"

    def files(self) -> list[File]:
        return [File(filename="stored.txt", data=self.value)]

    def load(self, fetcher: FileFetcher) -> bool:
        if (file := fetcher.fetch_by_name("stored.txt")) is None:
            return False
        self.value = file.data
        self.loaded = True
        return True


@pytest.fixture(name="config")
def config_fixture() -> AssetsConfig:
    """An empty run configuration."""
    return AssetsConfig()


def test_resolve_single_asset(config: AssetsConfig) -> None:
    """Test resolving an asset without dependencies."""
    resolved = resolve([Leaf], config)
    assert list(resolved) == [Leaf]
    assert isinstance(resolved[Leaf], Leaf)
    assert GENERATED == {"Leaf": 1}


def test_shared_dependency_generated_once(config: AssetsConfig) -> None:
    """Test a dependency reachable through several paths is computed once."""
    resolved = resolve([Top], config)
    assert GENERATED == {"Leaf": 1, "Left": 1, "Right": 1, "Top": 1}

    leaf = resolved[Leaf]
    assert resolved[Left].parents[Leaf] is leaf
    assert resolved[Right].parents[Leaf] is leaf
    assert resolved[Top].parents[Leaf] is leaf
    assert resolved[Top].parents[Left] is resolved[Left]


def test_dependencies_before_dependents(config: AssetsConfig) -> None:
    """Test every asset is computed after all of its dependencies."""
    resolve([Top], config)
    assert ORDER == ["Leaf", "Left", "Right", "Top"]


def test_multiple_targets_share_resolution(config: AssetsConfig) -> None:
    """Test requesting overlapping targets in one call."""
    resolved = resolve([Left, Right], config)
    assert set(resolved) == {Leaf, Left, Right}
    assert GENERATED["Leaf"] == 1


def test_separate_resolutions_are_independent(config: AssetsConfig) -> None:
    """Test each call to resolve computes assets again."""
    first = resolve([Leaf], config)
    second = resolve([Leaf], config)
    assert first[Leaf] is not second[Leaf]
    assert GENERATED["Leaf"] == 2


def test_failure_is_wrapped_with_asset_name(config: AssetsConfig) -> None:
    """Test an error while generating names the failing asset."""
    with pytest.raises(ResolutionError, match='"Broken": boom') as exc_info:
        resolve([DependsOnBroken], config)
    assert exc_info.value.asset_name == "Broken"
    assert isinstance(exc_info.value.__cause__, ValueError)
    assert "Depends On Broken" not in GENERATED


def test_failure_is_not_wrapped_twice(config: AssetsConfig) -> None:
    """Test the dependent does not re-wrap the error of its dependency."""
    with pytest.raises(ResolutionError) as exc_info:
        resolve([DependsOnBroken], config)
    assert str(exc_info.value) == 'failed to resolve asset "Broken": boom'


def test_template_fault_propagates(config: AssetsConfig) -> None:
    """Test a broken template is raised as is and not as a recoverable error."""
    with pytest.raises(TemplateFault, match="bad template"):
        resolve([Faulty], config)
    assert not issubclass(TemplateFault, AssetException)


def test_dependency_cycle(config: AssetsConfig) -> None:
    """Test a dependency cycle is reported instead of recursing forever."""
    with pytest.raises(ResolutionError, match="dependency cycle") as exc_info:
        resolve([CycleA], config)
    assert "Cycle A > Cycle B > Cycle A" in str(exc_info.value)


def test_parents_only_expose_declared_dependencies(config: AssetsConfig) -> None:
    """Test an asset can't reach assets it did not declare."""
    parents = Parents(config, {Leaf: Leaf()})
    assert Leaf in parents
    assert Left not in parents
    with pytest.raises(AssetException, match="not a resolved dependency"):
        parents.get(Left)


def test_load_mode_uses_stored_files(config: AssetsConfig) -> None:
    """Test a writable asset found in the store is loaded, not generated."""
    fetcher = InMemoryFileFetcher([File(filename="stored.txt", data=b"from disk")])
    resolved = resolve([Stored], config, fetcher, ResolveMode.LOAD)
    stored = resolved[Stored]
    assert isinstance(stored, Stored)
    assert stored.loaded
    assert stored.value == b"from disk"
    assert "Stored" not in GENERATED
    # Dependencies are still resolved before the asset is loaded
    assert GENERATED["Leaf"] == 1


def test_load_mode_falls_back_to_generate(config: AssetsConfig) -> None:
    """Test a writable asset missing from the store is generated."""
    resolved = resolve([Stored], config, InMemoryFileFetcher(), ResolveMode.LOAD)
    stored = resolved[Stored]
    assert isinstance(stored, Stored)
    assert not stored.loaded
    assert stored.value == b"generated"


def test_generate_mode_ignores_store(config: AssetsConfig) -> None:
    """Test the store is not consulted when generating."""
    fetcher = InMemoryFileFetcher([File(filename="stored.txt", data=b"from disk")])
    resolved = AssetResolver(config, fetcher).resolve([Stored])
    assert resolved[Stored].value == b"generated"  # type: ignore[attr-defined]


def test_load_mode_requires_fetcher(config: AssetsConfig) -> None:
    """Test loading without a file store is rejected."""
    with pytest.raises(ValueError, match="fetcher"):
        AssetResolver(config, mode=ResolveMode.LOAD)
