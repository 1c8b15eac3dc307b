# File: bobo_site/api/v1/api.py

from fastapi import APIRouter

from bobo_site.api.v1.routes_project import router as project_router
from bobo_site.api.v1.routes_site import router as site_router


api_router = APIRouter()

api_router.include_router(project_router, prefix="/projects", tags=["projects"])
api_router.include_router(site_router, prefix="/site", tags=["site"])
