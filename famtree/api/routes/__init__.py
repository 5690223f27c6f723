from fastapi import APIRouter
from . import auth, groups, analytics

router = APIRouter()

router.include_router(auth.router, prefix="/auth", tags=["Auth"])
router.include_router(groups.router, prefix="/groups", tags=["Family Groups"])
router.include_router(analytics.router, prefix="/analytics", tags=["Analytics"])
