from fastapi import APIRouter

from nethermod_manager.routers.analysis import router as analysis_router
from nethermod_manager.routers.profiles import router as profiles_router
from nethermod_manager.routers.servers import router as servers_router

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(servers_router)
api_router.include_router(analysis_router)
api_router.include_router(profiles_router)
