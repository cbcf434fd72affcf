"""Module Routes & Catalog Service — local fallback and lookup by key."""

from vyral.config import Settings
from vyral.core.errors import ModuleCatalogError
from vyral.core.module_catalog import LOCAL_MODULES, ModuleCard
from vyral.main import app
from vyral.services.module_catalog import ModuleCatalogService, build_module_catalog


class FailingSource:
    async def fetch_modules(self) -> list[ModuleCard]:
        raise ModuleCatalogError("down", "connection_error")


class StaticSource:
    def __init__(self, modules: list[ModuleCard]):
        self.modules = modules

    async def fetch_modules(self) -> list[ModuleCard]:
        return self.modules


async def test_lists_local_catalog(client):
    res = await client.get("/api/v1/modules")
    assert res.status_code == 200
    assert len(res.json()) == 8
    assert res.json()[0]["module_key"] == "Core"


async def test_get_module_by_any_key(client):
    res = await client.get("/api/v1/modules/skrybe")
    assert res.json()["title"] == "Skrybe Forge"


async def test_unknown_module_returns_404(client):
    res = await client.get("/api/v1/modules/atlantis")
    assert res.status_code == 404
    assert res.json()["error"]["code"] == "RESOURCE_NOT_FOUND"


async def test_remote_failure_falls_back_to_local(client):
    app.state.module_catalog = ModuleCatalogService(FailingSource())
    res = await client.get("/api/v1/modules")
    assert res.status_code == 200
    assert len(res.json()) == len(LOCAL_MODULES)


async def test_remote_catalog_replaces_local():
    remote = [LOCAL_MODULES[4]]
    service = ModuleCatalogService(StaticSource(remote))
    assert await service.list_modules() == remote
    assert await ModuleCatalogService(StaticSource([])).list_modules() == list(LOCAL_MODULES)


def test_build_without_credentials_is_local_only():
    service = build_module_catalog(Settings(supabase_url="", supabase_anon_key=""))
    assert service._source is None


def test_build_with_credentials_wires_supabase():
    service = build_module_catalog(
        Settings(supabase_url="https://x.supabase.co", supabase_anon_key="k"),
    )
    assert service._source.endpoint == "https://x.supabase.co/rest/v1/modules"
