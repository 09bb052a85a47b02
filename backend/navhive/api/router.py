from fastapi import APIRouter, Depends

from navhive.api.auth import router as auth_router
from navhive.api.configs import router as configs_router
from navhive.api.groups import router as groups_router
from navhive.api.health import router as health_router
from navhive.api.orders import router as orders_router
from navhive.api.setup import router as setup_router
from navhive.api.sites import router as sites_router
from navhive.api.transfer import router as transfer_router
from navhive.utils.auth import require_auth

api_router = APIRouter()

# Reachable without a token
api_router.include_router(health_router, tags=["health"])
api_router.include_router(auth_router)
api_router.include_router(setup_router)

# Everything else goes through the auth gate
protected_router = APIRouter(dependencies=[Depends(require_auth)])
protected_router.include_router(groups_router)
protected_router.include_router(sites_router)
protected_router.include_router(orders_router)
protected_router.include_router(configs_router)
protected_router.include_router(transfer_router)

api_router.include_router(protected_router)
