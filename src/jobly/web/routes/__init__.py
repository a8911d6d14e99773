"""Aggregates all API route sub-routers."""

from fastapi import APIRouter

from jobly.web.routes.auth import router as auth_router
from jobly.web.routes.companies import router as companies_router
from jobly.web.routes.jobs import router as jobs_router

router = APIRouter()
router.include_router(auth_router)
router.include_router(companies_router)
router.include_router(jobs_router)
