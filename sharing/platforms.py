"""
Credential schemas of the supported sharing platforms
"""

from enum import Enum
from typing import Annotated, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, StringConstraints, field_validator

# Non-blank credential value
Value = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class SharePlatform(str, Enum):
  WECHAT = "wechat"
  QQ = "qq"
  SINA_WEIBO = "sina_weibo"
  FACEBOOK = "facebook"


class AuthType(str, Enum):
  """How the platform authorizes the user"""

  SSO = "sso"  # Platform's own app
  WEB = "web"  # Web page
  BOTH = "both"  # App if installed, otherwise web


class PlatformConfig(BaseModel):
  """Validated credential of one platform"""

  # Keep secret values out of validation errors
  model_config = ConfigDict(frozen=True, extra="forbid", hide_input_in_errors=True)


class WeChatConfig(PlatformConfig):
  app_id: Value
  app_secret: Value = Field(repr=False)
  universal_link: Optional[Value] = None


class QQConfig(PlatformConfig):
  app_id: Value
  app_key: Value = Field(repr=False)
  auth_type: AuthType = AuthType.SSO


class SinaWeiboConfig(PlatformConfig):
  app_key: Value
  app_secret: Value = Field(repr=False)
  redirect_uri: Value
  auth_type: AuthType = AuthType.BOTH

  @field_validator("redirect_uri")
  @classmethod
  def validate_redirect_uri(cls, v: str) -> str:
    if not v.startswith(("http://", "https://")):
      raise ValueError(f"redirect_uri must be an http(s) URL, got: {v}")
    return v


class FacebookConfig(PlatformConfig):
  app_id: Value
  app_secret: Value = Field(repr=False)
  display_name: Optional[Value] = None
  auth_type: AuthType = AuthType.BOTH


PLATFORM_SCHEMAS: Dict[SharePlatform, type[PlatformConfig]] = {
  SharePlatform.WECHAT: WeChatConfig,
  SharePlatform.QQ: QQConfig,
  SharePlatform.SINA_WEIBO: SinaWeiboConfig,
  SharePlatform.FACEBOOK: FacebookConfig,
}


def parse_platform_config(
  platform: SharePlatform, entries: Mapping[str, str]
) -> PlatformConfig:
  """
  Validate credential entries against the platform's schema

  Raises:
      pydantic.ValidationError: If fields are missing, blank or unknown
  """
  return PLATFORM_SCHEMAS[platform].model_validate(dict(entries))
