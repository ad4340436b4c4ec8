"""
API router aggregation.
"""
from fastapi import APIRouter

from ridehail.api.v1.endpoints import auth, driver, profile

api_router = APIRouter()

api_router.include_router(auth.router)
api_router.include_router(profile.router)
api_router.include_router(driver.router)
