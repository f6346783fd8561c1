"""PMO: API v1 router aggregation."""
from fastapi import APIRouter

from pmo.api.v1.endpoints import (
    construction_projects,
    contractors,
    documents,
    funding_sources,
    media,
    projects,
    repair_projects,
    repair_types,
    settings,
)

api_router = APIRouter()

api_router.include_router(projects.router, prefix="/projects", tags=["projects"])
api_router.include_router(
    construction_projects.router, prefix="/construction-projects", tags=["construction-projects"]
)
api_router.include_router(repair_projects.router, prefix="/repair-projects", tags=["repair-projects"])
api_router.include_router(contractors.router, prefix="/contractors", tags=["contractors"])
api_router.include_router(funding_sources.router, prefix="/funding-sources", tags=["funding-sources"])
api_router.include_router(repair_types.router, prefix="/repair-types", tags=["repair-types"])
api_router.include_router(documents.router, prefix="/documents", tags=["documents"])
api_router.include_router(media.router, prefix="/media", tags=["media"])
api_router.include_router(settings.router, prefix="/settings", tags=["settings"])
