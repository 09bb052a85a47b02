import enum
import logging

from sqlalchemy import Executable, func, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from navhive.models.group import Group
from navhive.models.site import Site
from navhive.schemas.order import OrderItem

logger = logging.getLogger(__name__)


class OrderScope(enum.StrEnum):
    groups = "groups"
    sites = "sites"


_SCOPE_MODELS: dict[OrderScope, type[Group] | type[Site]] = {
    OrderScope.groups: Group,
    OrderScope.sites: Site,
}


class BatchAtomicityError(Exception):
    pass


class OrderService:
    """
    Persists a drag-and-drop reordering of one scope.

    Every item is written in one transaction, so a failure leaves every row
    at its previous position. Ids that do not exist match no row and are
    skipped without failing the batch.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    async def apply(self, scope: OrderScope, items: list[OrderItem]) -> bool:
        model = _SCOPE_MODELS[scope]
        statements = [
            update(model)
            .where(model.id == item.id)
            .values(order_num=item.order_num, updated_at=func.now())
            for item in items
        ]

        try:
            matched = await self._execute_batch(statements)
        except (SQLAlchemyError, BatchAtomicityError):
            logger.exception(f"Failed to reorder {scope} ({len(items)} items)")
            return False

        if matched < len(items):
            logger.debug(f"Reorder of {scope} skipped {len(items) - matched} unknown ids")
        return True

    async def _bind_is_transactional(self) -> bool:
        connection = await self.db.connection()
        options = connection.sync_connection.get_execution_options()
        if options.get("isolation_level") == "AUTOCOMMIT":
            return False

        # Engine-level isolation_level is applied to the driver connection, not to the options
        raw = await connection.get_raw_connection()
        try:
            return not connection.dialect.detect_autocommit_setting(raw.dbapi_connection)
        except NotImplementedError:
            logger.debug(f"{connection.dialect.name} cannot report autocommit state")
            return True

    async def _execute_batch(self, statements: list[Executable]) -> int:
        if not await self._bind_is_transactional():
            raise BatchAtomicityError("AUTOCOMMIT bind cannot apply a batch atomically")

        matched = 0
        try:
            for statement in statements:
                result = await self.db.execute(statement)
                matched += result.rowcount
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise

        # Rows changed behind the identity map
        self.db.expire_all()
        return matched
