# structure_websites/config.py
from __future__ import annotations

from typing import Any, List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _as_bool(v: Any) -> bool:
    if isinstance(v, bool):
        return v
    return str(v).strip().lower() in {"1", "true", "yes", "on"}


def _as_list(v: str | None) -> List[str]:
    return [item.strip() for item in (v or "").split(",") if item.strip()]


class Settings(BaseSettings):
    # Service
    service_name: str = "structure-websites-service"
    app_port: int = 9030
    log_level: str = "INFO"

    # Mongo (core registry db + one db per tenant on the same cluster)
    mongo_uri: str = "mongodb://localhost:27017"
    core_db_name: str = Field("core", validation_alias="MONGO_DB_NAME")

    # Guards
    local_development: bool = False
    role_header: str = Field("X-Platform-Role", validation_alias="PLATFORM_ROLE_HEADER")
    platform_admin_roles: str = "platform_admin"

    # Tenant resolution
    tenant_header: str = "X-Client-Name"
    default_tenant: str = "default"

    # Template fan-out
    default_target_field: str = Field("structure_template", validation_alias="TEMPLATE_TARGET_FIELD")
    legacy_target_field: str = Field("template", validation_alias="TEMPLATE_LEGACY_FIELD")

    model_config = SettingsConfigDict(env_file=None, env_ignore_empty=True, populate_by_name=True, extra="ignore")

    @field_validator("local_development", mode="before")
    @classmethod
    def _lenient_flag(cls, v: Any) -> bool:
        # anything outside the truthy set means "off"
        return _as_bool(v)

    @property
    def admin_roles(self) -> List[str]:
        # comma-separated in env
        return _as_list(self.platform_admin_roles)


settings = Settings()
