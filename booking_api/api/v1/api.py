from fastapi import APIRouter

from booking_api.api.v1.endpoints import admin, public

api_router = APIRouter()

# Public booking endpoints (customer-facing)
api_router.include_router(public.router, tags=["public"])

# Admin login, then token-protected admin endpoints
api_router.include_router(admin.router, prefix="/admin", tags=["admin"])
api_router.include_router(admin.protected_router, prefix="/admin", tags=["admin"])
