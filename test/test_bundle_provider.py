"""Tests for the bundle screen provider"""

import pytest

from os_interfaces.base import Screen
from os_interfaces.bundle import DEFAULT_BUNDLE_DIR, BundleScreenProvider


@pytest.fixture
def bundle(tmp_path):
  (tmp_path / "MainAppViewController.html").write_text("<h1>main</h1>")
  (tmp_path / "SettingsViewController.html").write_text("<h1>settings</h1>")
  (tmp_path / "notes.txt").write_text("not a screen")
  return tmp_path


class TestBundleScreenProvider:
  def test_scans_html_pages(self, bundle):
    provider = BundleScreenProvider(bundle_dir=bundle)
    assert provider.screens == {
      "MainAppViewController": "MainAppViewController.html",
      "SettingsViewController": "SettingsViewController.html",
    }

  def test_resolves_known_screen(self, bundle):
    provider = BundleScreenProvider(bundle_dir=bundle)
    screen = provider.resolve("MainAppViewController")

    assert screen == Screen(
      identifier="MainAppViewController",
      url=(bundle / "MainAppViewController.html").resolve().as_uri(),
    )

  def test_unknown_screen(self, bundle):
    provider = BundleScreenProvider(bundle_dir=bundle)
    assert provider.resolve("DoesNotExist") is None
    assert provider.resolve("notes") is None

  def test_resolution_is_stable(self, bundle):
    provider = BundleScreenProvider(bundle_dir=bundle)
    first = provider.resolve("MainAppViewController")

    (bundle / "MainAppViewController.html").unlink()

    assert provider.resolve("MainAppViewController") is first

  def test_explicit_mapping(self, bundle):
    provider = BundleScreenProvider(
      bundle_dir=bundle, screens={"Home": "MainAppViewController.html"}
    )
    assert provider.resolve("Home").url.endswith("MainAppViewController.html")
    assert provider.resolve("MainAppViewController") is None

  def test_mapped_page_missing(self, bundle):
    provider = BundleScreenProvider(bundle_dir=bundle, screens={"Gone": "gone.html"})
    assert provider.resolve("Gone") is None

  def test_missing_bundle_dir(self, tmp_path):
    provider = BundleScreenProvider(bundle_dir=tmp_path / "nope")
    assert provider.screens == {}
    assert provider.resolve("MainAppViewController") is None

  def test_default_bundle_ships_main_screen(self, monkeypatch):
    monkeypatch.setattr("os_interfaces.bundle.AppConfig.BUNDLE_DIR", None)
    provider = BundleScreenProvider()

    assert provider.bundle_dir == DEFAULT_BUNDLE_DIR
    assert provider.resolve("MainAppViewController") is not None
