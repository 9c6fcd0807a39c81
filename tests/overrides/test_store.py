"""Tests for OverrideStore caching and lookup."""

import threading
import time
from unittest.mock import Mock

import pytest

from productmeta.config import OverridesSettings
from productmeta.errors import OverrideDecodeError, OverridesNotLoadedError
from productmeta.overrides import (
    OverrideKind,
    Overrides,
    OverrideStore,
    ProductBasePathDetails,
    ProductDocsSectionDetails,
    ProductTitleDetails,
    YamlOverrideLoader,
)
from productmeta.types import PackagePath


class TestEnsureLoaded:
    def test_loads_once(self, counting_loader):
        store = OverrideStore(counting_loader)

        first = store.ensure_loaded(PackagePath("compute"))
        second = store.ensure_loaded(PackagePath("compute"))

        assert counting_loader.calls == [("compute", "tpgtools_product.yaml")]
        assert first is second

    def test_accepts_plain_strings(self, counting_loader):
        store = OverrideStore(counting_loader)

        store.ensure_loaded("compute")
        store.ensure_loaded(PackagePath("compute"))

        assert len(counting_loader.calls) == 1
        assert store.is_loaded("compute")

    def test_each_path_loaded_separately(self, counting_loader):
        store = OverrideStore(counting_loader)

        store.ensure_loaded("compute")
        store.ensure_loaded("dns")

        assert [c[0] for c in counting_loader.calls] == ["compute", "dns"]
        assert store.loaded_paths() == [PackagePath("compute"), PackagePath("dns")]

    def test_passes_file_name(self, counting_loader):
        store = OverrideStore(counting_loader, file_name="other.yaml")

        store.ensure_loaded("compute")

        assert counting_loader.calls == [("compute", "other.yaml")]

    def test_failed_load_is_not_cached(self):
        loader = Mock()
        loader.load.side_effect = [OverrideDecodeError("dns", "broken"), Overrides()]
        store = OverrideStore(loader)

        with pytest.raises(OverrideDecodeError):
            store.ensure_loaded("dns")
        assert not store.is_loaded("dns")

        store.ensure_loaded("dns")
        assert store.is_loaded("dns")

    def test_concurrent_first_load_happens_once(self):
        calls = []

        class SlowLoader:
            def load(self, package_path, file_name):
                calls.append(str(package_path))
                time.sleep(0.05)
                return Overrides()

        store = OverrideStore(SlowLoader())
        results = []
        threads = [
            threading.Thread(target=lambda: results.append(store.ensure_loaded("compute")))
            for _ in range(8)
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert calls == ["compute"]
        assert len(results) == 8
        assert all(result is results[0] for result in results)


class TestLookup:
    def test_absent_override_returns_none(self, make_store):
        store = make_store()
        store.ensure_loaded("compute")

        assert store.lookup("compute", OverrideKind.TITLE, ProductTitleDetails) is None

    def test_decodes_details(self, make_store):
        store = make_store(
            {
                "osconfig": [
                    {
                        "type": "PRODUCT_BASE_PATH",
                        "details": {"basepathidentifier": "os_config", "skip": True},
                    }
                ]
            }
        )
        store.ensure_loaded("osconfig")

        details = store.lookup("osconfig", OverrideKind.BASE_PATH, ProductBasePathDetails)

        assert details == ProductBasePathDetails(base_path_identifier="os_config", skip=True)

    def test_malformed_details_raise(self, make_store):
        store = make_store(
            {"dns": [{"type": "PRODUCT_DOCS_SECTION", "details": {"section": "DNS"}}]}
        )
        store.ensure_loaded("dns")

        with pytest.raises(OverrideDecodeError) as exc_info:
            store.lookup("dns", OverrideKind.DOCS_SECTION, ProductDocsSectionDetails)

        assert exc_info.value.kind == "PRODUCT_DOCS_SECTION"
        assert exc_info.value.package_path == "dns"

    def test_non_mapping_product_details_raise_on_lookup(self, make_store):
        store = make_store({"dns": [{"type": "PRODUCT_DOCS_SECTION", "details": "DNS"}]})
        store.ensure_loaded("dns")

        with pytest.raises(OverrideDecodeError):
            store.lookup("dns", OverrideKind.DOCS_SECTION, ProductDocsSectionDetails)

    def test_lookup_before_load_raises(self, make_store):
        store = make_store()

        with pytest.raises(OverridesNotLoadedError, match="compute"):
            store.lookup("compute", OverrideKind.TITLE, ProductTitleDetails)

    def test_auto_load(self, counting_loader):
        store = OverrideStore(counting_loader, auto_load=True)

        assert store.lookup("compute", OverrideKind.TITLE, ProductTitleDetails) is None
        assert store.is_loaded("compute")
        assert len(counting_loader.calls) == 1


class TestFromSettings:
    def test_builds_yaml_store(self, tmp_path):
        settings = OverridesSettings(directory=tmp_path, file_name="p.yaml", auto_load=True)

        store = OverrideStore.from_settings(settings)

        assert isinstance(store.loader, YamlOverrideLoader)
        assert store.loader.directory == tmp_path
        assert store.file_name == "p.yaml"
        assert store.auto_load is True

    def test_uses_global_settings(self, monkeypatch, tmp_path):
        monkeypatch.setenv("OVERRIDES_DIRECTORY", str(tmp_path))

        store = OverrideStore.from_settings()

        assert store.loader.directory == tmp_path
        assert store.file_name == "tpgtools_product.yaml"
