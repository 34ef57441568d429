from fastapi import APIRouter
from concursos.api.v1.endpoints import archive, catalog, health, maintenance, notes, procurements

router = APIRouter(prefix="/v1")

router.include_router(health.router, prefix="/health", tags=["Health"])
router.include_router(procurements.router, prefix="/procurements", tags=["Procurements"])
router.include_router(archive.router, prefix="/procurements", tags=["Archive"])
router.include_router(notes.router, prefix="/procurements", tags=["Notes"])
router.include_router(catalog.router, tags=["Catalog"])
router.include_router(maintenance.router, tags=["Maintenance"])
