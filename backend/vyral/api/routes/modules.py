"""Module Routes — navigation module catalog (remote with local fallback).

Invariants:
    - GET /modules always answers 200; remote failures degrade to the local catalog
    - GET /modules/{key} matches id, module_key, key or route_name, case-insensitive
"""

from fastapi import APIRouter, Depends

from vyral.schemas.modules import ModuleCardResponse
from vyral.services.module_catalog import ModuleCatalogService, get_module_catalog

router = APIRouter(prefix="/api/v1/modules", tags=["modules"])


@router.get("", response_model=list[ModuleCardResponse])
async def list_modules(
    catalog: ModuleCatalogService = Depends(get_module_catalog),
):
    return [ModuleCardResponse.from_card(m) for m in await catalog.list_modules()]


@router.get("/{key}", response_model=ModuleCardResponse)
async def get_module(
    key: str, catalog: ModuleCatalogService = Depends(get_module_catalog),
):
    return ModuleCardResponse.from_card(await catalog.get_module(key))
