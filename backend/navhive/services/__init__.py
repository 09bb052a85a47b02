"""Service layer for business logic."""

from navhive.services.config_service import ConfigService
from navhive.services.group_service import GroupService
from navhive.services.order_service import OrderScope, OrderService
from navhive.services.setup_service import SetupService
from navhive.services.site_service import SiteService
from navhive.services.token_service import TokenService, get_token_service
from navhive.services.transfer_service import TransferService

__all__ = [
    "ConfigService",
    "GroupService",
    "OrderScope",
    "OrderService",
    "SetupService",
    "SiteService",
    "TokenService",
    "get_token_service",
    "TransferService",
]
