"""Pytest configuration and shared fixtures."""

import pytest
import yaml

from productmeta.config import reset_settings
from productmeta.const import PRODUCT_OVERRIDES_FILE
from productmeta.overrides import OverrideStore, Overrides, parse_overrides
from productmeta.utils.logging import setup_logging


class CountingLoader:
    """In-memory override loader that records every load call."""

    def __init__(self, overrides_by_path: dict | None = None):
        self.overrides_by_path = overrides_by_path or {}
        self.calls: list[tuple[str, str]] = []

    def load(self, package_path, file_name):
        self.calls.append((str(package_path), file_name))
        raw = self.overrides_by_path.get(str(package_path))
        if raw is None:
            return Overrides()
        return parse_overrides(raw, package_path)


@pytest.fixture(scope="session", autouse=True)
def configure_logging():
    setup_logging()


@pytest.fixture(autouse=True)
def reset_config_settings():
    """Reset the settings singleton before and after each test.

    pydantic-settings reads env vars at instantiation time, so monkeypatched
    variables only apply to a fresh instance.
    """
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def counting_loader():
    return CountingLoader()


@pytest.fixture
def make_store():
    """Build a store over in-memory override records keyed by package path."""

    def _make(overrides_by_path: dict | None = None, **kwargs) -> OverrideStore:
        return OverrideStore(CountingLoader(overrides_by_path), **kwargs)

    return _make


@pytest.fixture
def write_overrides(tmp_path):
    """Write an override file for a package under tmp_path/overrides."""
    root = tmp_path / "overrides"
    root.mkdir()

    def _write(package_path: str, records, file_name: str = PRODUCT_OVERRIDES_FILE):
        package_dir = root / package_path
        package_dir.mkdir(parents=True, exist_ok=True)
        path = package_dir / file_name
        if isinstance(records, str):
            path.write_text(records)
        else:
            path.write_text(yaml.safe_dump(records))
        return path

    _write.root = root
    return _write
