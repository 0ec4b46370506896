from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from ejforge.errors import DependencyFetchError  # noqa: E402
from ejforge.io.adapters.system import (  # noqa: E402
    FixedPrompt,
    FixedToolchainProbe,
    StaticModuleLookup,
)
from ejforge.io.interfaces import DependencyFetcher  # noqa: E402
from ejforge.scaffold import ProjectMaterializer  # noqa: E402


class RecordingFetcher(DependencyFetcher):
    """Remember fetch calls and optionally fail them."""

    def __init__(self, error: str | None = None) -> None:
        self.calls: list[Path] = []
        self.error = error

    def fetch(self, project_dir: Path) -> None:
        self.calls.append(project_dir)
        if self.error is not None:
            raise DependencyFetchError(self.error)


@pytest.fixture()
def fetcher() -> RecordingFetcher:
    return RecordingFetcher()


@pytest.fixture()
def make_materializer(fetcher: RecordingFetcher) -> Callable[..., ProjectMaterializer]:
    """Build a materializer with deterministic host services."""

    def factory(
        *,
        answer: bool = False,
        taken: tuple[str, ...] = ("Enum", "Ejabberd.Module"),
        version: str = "1.2.3",
        dependency_fetcher: DependencyFetcher | None = None,
        echo: Callable[[str], None] = lambda line: None,
    ) -> ProjectMaterializer:
        return ProjectMaterializer(
            StaticModuleLookup(taken),
            FixedPrompt(answer),
            dependency_fetcher or fetcher,
            FixedToolchainProbe(version),
            echo=echo,
        )

    return factory


@pytest.fixture()
def failing_fetcher() -> RecordingFetcher:
    return RecordingFetcher(error="mix deps.get exited with status 1")
