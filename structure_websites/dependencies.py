# structure_websites/dependencies.py
from __future__ import annotations

import re

from fastapi import Depends, Request
from motor.motor_asyncio import AsyncIOMotorDatabase

from structure_websites.config import Settings, settings as _settings
from structure_websites.db.mongodb import get_core_db, get_tenant_db
from structure_websites.errors import GuardViolationError

_UNSAFE = re.compile(r"[^a-z0-9_\-]")


def normalize_tenant_name(name: str | None, default: str = "default") -> str:
    """
    Lower-case, trim, spaces -> '-', drop anything outside [a-z0-9-_].
    Falls back to `default` when nothing usable is left.
    """
    cleaned = _UNSAFE.sub("", (name or "").strip().lower().replace(" ", "-"))
    return cleaned or default


def get_settings() -> Settings:
    return _settings


def get_tenant_name(request: Request, settings: Settings = Depends(get_settings)) -> str:
    return normalize_tenant_name(request.headers.get(settings.tenant_header), settings.default_tenant)


def tenant_db(tenant: str = Depends(get_tenant_name)) -> AsyncIOMotorDatabase:
    return get_tenant_db(tenant)


def core_db() -> AsyncIOMotorDatabase:
    return get_core_db()


def tenant_db_factory():
    return get_tenant_db


def require_platform_role(request: Request, settings: Settings = Depends(get_settings)) -> None:
    """
    Cross-tenant mutations: open in local development, otherwise the caller's
    platform role (set by the upstream auth layer) must be an admin role.
    """
    if settings.local_development:
        return
    role = (request.headers.get(settings.role_header) or "").strip()
    if role not in settings.admin_roles:
        raise GuardViolationError(
            "platform role required outside LOCAL_DEVELOPMENT", operation="apply_template"
        )
