"""Tests for the launch entrypoints"""

import json
from unittest.mock import patch

import pytest

from bootstrap.models import Failed, LaunchConfiguration, Ready
from entrypoints import launch_linux
from entrypoints.launch_core import AppLauncher, check_registrations, run_app
from os_interfaces.base import OSImplementations
from sharing import ShareRegistrar
from stubs import StubRegistrar, StubScreenProvider, StubSurface


@pytest.fixture
def surface():
  return StubSurface()


@pytest.fixture
def os_impl(surface):
  return OSImplementations(
    surface_cls=lambda: surface,
    screen_provider_cls=StubScreenProvider,
    platform_registrar_cls=StubRegistrar,
  )


class TestAppLauncher:
  def test_launch_succeeds(self, os_impl, surface):
    launcher = AppLauncher(os_impl, LaunchConfiguration(screen="MainAppViewController"))

    assert launcher.launch() is True
    assert isinstance(launcher.result, Ready)
    assert surface.visible

  def test_launch_ignores_registration_failures(self, surface):
    os_impl = OSImplementations(
      surface_cls=lambda: surface,
      screen_provider_cls=StubScreenProvider,
      platform_registrar_cls=ShareRegistrar,
    )
    config = LaunchConfiguration(
      screen="MainAppViewController",
      registrations=[{"platform": "wechat", "credential": {"app_id": "", "app_secret": ""}}],
    )
    launcher = AppLauncher(os_impl, config)

    assert launcher.launch() is True
    assert len(launcher.result.registrations.errors(timeout=5)) == 1

  def test_launch_fails_for_unknown_screen(self, os_impl, surface):
    launcher = AppLauncher(os_impl, LaunchConfiguration(screen="DoesNotExist"))

    assert launcher.launch() is False
    assert isinstance(launcher.result, Failed)
    assert not surface.visible

  def test_run_app_enters_event_loop(self, os_impl, surface):
    run_app(os_impl=os_impl, config=LaunchConfiguration(screen="MainAppViewController"))
    assert surface.events[-1] == "run"

  def test_run_app_exits_on_failure(self, os_impl, surface):
    with pytest.raises(SystemExit) as exc_info:
      run_app(os_impl=os_impl, config=LaunchConfiguration(screen="DoesNotExist"))
    assert exc_info.value.code == 1
    assert "run" not in surface.events


class TestCheckRegistrations:
  def test_reports_failures_only(self, os_impl):
    config = LaunchConfiguration(
      screen="MainAppViewController",
      registrations=[
        {"platform": "wechat", "credential": {"app_id": "wx1", "app_secret": "s"}},
        {"platform": "qq", "credential": {}},
      ],
    )
    impl = OSImplementations(
      surface_cls=os_impl.surface_cls,
      screen_provider_cls=os_impl.screen_provider_cls,
      platform_registrar_cls=ShareRegistrar,
    )

    records = check_registrations(os_impl=impl, config=config, timeout=5)

    assert [r.platform for r in records] == ["qq"]
    assert records[0].description == "Platform 'qq': credential is empty"


class TestLinuxMain:
  def test_check_prints_json(self, tmp_path, capsys):
    config_path = tmp_path / "launch.yaml"
    config_path.write_text(
      "screen: MainAppViewController\n"
      "registrations:\n"
      "  - platform: wechat\n"
      "    credential: {app_id: '', app_secret: ''}\n"
    )

    with pytest.raises(SystemExit) as exc_info:
      launch_linux.main(["--check", "--config", str(config_path)])

    assert exc_info.value.code == 1
    [record] = json.loads(capsys.readouterr().out)
    assert record["platform"] == "wechat"
    assert record["stage"] == "registration"

  def test_bad_config_exits(self, tmp_path):
    with pytest.raises(SystemExit) as exc_info:
      launch_linux.main(["--config", str(tmp_path / "missing.yaml")])
    assert exc_info.value.code == 1

  @patch("entrypoints.launch_linux.run_app")
  def test_plain_drops_registrations(self, mock_run_app, tmp_path):
    config_path = tmp_path / "launch.yaml"
    config_path.write_text(
      "screen: MainAppViewController\n"
      "registrations:\n"
      "  - platform: wechat\n"
      "    credential: {app_id: wx1, app_secret: s}\n"
    )

    launch_linux.main(["--plain", "--config", str(config_path)])

    config = mock_run_app.call_args.kwargs["config"]
    assert config.screen == "MainAppViewController"
    assert config.registrations == ()
