"""Module Catalog Service — remote catalog with local fallback.

Invariants:
    - list_modules never raises for a remote failure: it logs and serves LOCAL_MODULES
    - An empty remote result also falls back to LOCAL_MODULES
    - No remote source configured -> LOCAL_MODULES without any network call

Design Decisions:
    - The remote source is a ModuleCatalogSource Protocol so tests swap in fakes
    - No caching: the catalog is small and read on navigation only
"""

import logging

from fastapi import Request

from vyral.config import Settings
from vyral.core.boundary_protocols import ModuleCatalogSource
from vyral.core.errors import ModuleCatalogError, ResourceNotFoundError
from vyral.core.module_catalog import LOCAL_MODULES, ModuleCard, find_module
from vyral.infrastructure.module_catalog_client import SupabaseModuleCatalog

logger = logging.getLogger(__name__)


class ModuleCatalogService:
    def __init__(self, source: ModuleCatalogSource | None = None):
        self._source = source

    async def list_modules(self) -> list[ModuleCard]:
        if self._source is None:
            return list(LOCAL_MODULES)
        try:
            modules = await self._source.fetch_modules()
        except ModuleCatalogError as e:
            logger.warning(
                f"Remote module catalog unavailable, serving local catalog: {e.message}",
                extra={"error_code": e.code},
            )
            return list(LOCAL_MODULES)
        return modules or list(LOCAL_MODULES)

    async def get_module(self, key: str) -> ModuleCard:
        module = find_module(await self.list_modules(), key)
        if module is None:
            raise ResourceNotFoundError("Module", key)
        return module


def build_module_catalog(settings: Settings) -> ModuleCatalogService:
    """Wire the Supabase source when it is configured, local-only otherwise."""
    if not settings.remote_catalog_enabled:
        return ModuleCatalogService()
    return ModuleCatalogService(
        SupabaseModuleCatalog(
            url=settings.supabase_url,
            anon_key=settings.supabase_anon_key,
            table=settings.supabase_modules_table,
            timeout_seconds=settings.catalog_timeout_seconds,
            max_retries=settings.catalog_max_retries,
            base_delay_ms=settings.catalog_base_delay_ms,
            max_delay_ms=settings.catalog_max_delay_ms,
        ),
    )


def get_module_catalog(request: Request) -> ModuleCatalogService:
    """FastAPI dependency: the catalog service created by the app lifespan."""
    service = getattr(request.app.state, "module_catalog", None)
    if service is None:
        raise RuntimeError("Module catalog not initialized")
    return service
