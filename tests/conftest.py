from collections.abc import Generator
import os

import pytest

from design_patterns.main.config import Config, get_settings
from design_patterns.prototype.nodes import File, Folder
from tests.helpers.singletons import reset_demo_singleton


@pytest.fixture(scope="session")
def settings() -> Config:
    os.environ.setdefault("TESTING", "true")
    get_settings.cache_clear()
    return get_settings()


@pytest.fixture
def fresh_demo_singleton() -> Generator[None]:
    reset_demo_singleton()
    yield
    reset_demo_singleton()


@pytest.fixture
def sample_tree() -> Folder:
    return Folder(
        "root",
        [
            File("file1"),
            File("file2"),
            Folder("subfolder", [File("file3"), File("file4")]),
        ],
    )
