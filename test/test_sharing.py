"""Tests for sharing platform registration"""

import pytest
from pydantic import ValidationError

from bootstrap.exceptions import RegistrationError
from bootstrap.models import PlatformCredential
from sharing import (
  AuthType,
  PlatformRegistry,
  SharePlatform,
  ShareRegistrar,
  parse_platform_config,
)
from sharing.platforms import SinaWeiboConfig, WeChatConfig


def _credential(**entries):
  return PlatformCredential(entries=entries)


class TestPlatformSchemas:
  def test_wechat(self):
    config = parse_platform_config(
      SharePlatform.WECHAT, {"app_id": "wx1", "app_secret": "s3cret"}
    )
    assert isinstance(config, WeChatConfig)
    assert config.app_id == "wx1"
    assert config.universal_link is None
    assert "s3cret" not in repr(config)

  def test_auth_type_default_and_override(self):
    weibo = parse_platform_config(
      SharePlatform.SINA_WEIBO,
      {"app_key": "568898243", "app_secret": "s", "redirect_uri": "https://example.com/cb"},
    )
    assert isinstance(weibo, SinaWeiboConfig)
    assert weibo.auth_type is AuthType.BOTH

    qq = parse_platform_config(
      SharePlatform.QQ, {"app_id": "100", "app_key": "k", "auth_type": "web"}
    )
    assert qq.auth_type is AuthType.WEB

  def test_blank_field_rejected(self):
    with pytest.raises(ValidationError):
      parse_platform_config(SharePlatform.WECHAT, {"app_id": "wx1", "app_secret": " "})

  def test_unknown_field_rejected(self):
    with pytest.raises(ValidationError):
      parse_platform_config(
        SharePlatform.WECHAT, {"app_id": "wx1", "app_secret": "s", "extra": "x"}
      )

  def test_weibo_redirect_must_be_url(self):
    with pytest.raises(ValidationError, match="redirect_uri"):
      parse_platform_config(
        SharePlatform.SINA_WEIBO,
        {"app_key": "1", "app_secret": "s", "redirect_uri": "example.com"},
      )


class TestShareRegistrar:
  @pytest.mark.asyncio
  async def test_register_valid_platform(self):
    registrar = ShareRegistrar()
    await registrar.register("wechat", _credential(app_id="wx1", app_secret="s3cret"))

    assert registrar.registry.is_registered("wechat")
    assert registrar.registry.registered() == [SharePlatform.WECHAT]
    assert registrar.registry.get(SharePlatform.WECHAT).app_id == "wx1"

  @pytest.mark.asyncio
  async def test_empty_credential_rejected(self):
    registrar = ShareRegistrar()
    with pytest.raises(RegistrationError) as exc_info:
      await registrar.register("wechat", _credential(app_id="", app_secret=""))

    assert exc_info.value.platform == "wechat"
    assert exc_info.value.reason == "credential is empty"
    assert registrar.registry.registered() == []

  @pytest.mark.asyncio
  async def test_unknown_platform_rejected(self):
    registrar = ShareRegistrar()
    with pytest.raises(RegistrationError, match="unknown platform"):
      await registrar.register("myspace", _credential(app_id="1"))

  @pytest.mark.asyncio
  async def test_invalid_credential_reason_names_fields(self):
    registrar = ShareRegistrar()
    with pytest.raises(RegistrationError) as exc_info:
      await registrar.register("qq", _credential(app_id="100", secret="hunter2"))

    reason = exc_info.value.reason
    assert reason.startswith("invalid credential")
    assert "app_key" in reason
    assert "secret" in reason
    assert "hunter2" not in reason

  @pytest.mark.asyncio
  async def test_shared_registry(self):
    registry = PlatformRegistry()
    registrar = ShareRegistrar(registry=registry)
    await registrar.register("facebook", _credential(app_id="107704292745179", app_secret="s"))

    assert registry.is_registered(SharePlatform.FACEBOOK)
    assert not registry.is_registered("qq")

  def test_unknown_name_is_not_registered(self):
    registry = PlatformRegistry()
    assert registry.get("myspace") is None
    assert not registry.is_registered("myspace")
