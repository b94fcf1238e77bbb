import logging
from typing import Any, Generic, List, Sequence, Tuple, Type, TypeVar

from sqlalchemy import func, select as sqlalchemy_select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel, select

from app.domains.common.interfaces.repository_interface import (
    RecordNotFoundError,
    RepositoryInterface,
)
from app.domains.common.models.base_model import utcnow
from app.domains.common.models.pagination import PaginationRequest

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=SQLModel)

LIKE_ESCAPE = "\\"


def escape_like(term: str) -> str:
    """跳脫 LIKE 萬用字元，搜尋字串一律按字面比對"""
    return (
        term.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )


class SQLModelRepository(RepositoryInterface[ModelT], Generic[ModelT]):
    """SQLModel 通用儲存庫實現

    子類別只需指定 ``model``、``search_field`` 與 ``sortable_fields``。
    """

    model: Type[ModelT]
    search_field: str = "name"
    sortable_fields: Tuple[str, ...] = ("name", "created_at", "updated_at")

    def __init__(self, session: AsyncSession):
        self.session = session

    @property
    def _entity_name(self) -> str:
        return self.model.__name__.lower()

    async def create(self, entity: ModelT) -> ModelT:
        """創建一個新的記錄"""
        entity_id = entity.id
        logger.info(f"Attempting to create {self._entity_name}: {entity.id}")
        try:
            self.session.add(entity)
            await self.session.commit()
            await self.session.refresh(entity)
            logger.info(f"Successfully created {self._entity_name} with ID {entity.id}")
            return entity
        except Exception as e:
            await self.session.rollback()
            logger.error(
                f"Error creating {self._entity_name} {entity_id}: {e}", exc_info=True
            )
            raise  # 重新拋出異常，讓上層處理

    async def update(self, entity: ModelT) -> ModelT:
        """更新記錄並刷新 updated_at"""
        entity_id = entity.id
        logger.debug(f"Updating {self._entity_name} (ID: {entity.id})")
        try:
            if hasattr(entity, "updated_at"):
                entity.updated_at = utcnow()
            self.session.add(entity)
            await self.session.commit()
            await self.session.refresh(entity)
            logger.info(f"Successfully updated {self._entity_name} (ID: {entity.id})")
            return entity
        except Exception as e:
            await self.session.rollback()
            logger.error(
                f"Error updating {self._entity_name} {entity_id}: {e}", exc_info=True
            )
            raise

    async def delete(self, entity: ModelT) -> None:
        """刪除記錄"""
        entity_id = entity.id
        logger.debug(f"Removing {self._entity_name} with ID: {entity.id}")
        try:
            await self.session.delete(entity)
            await self.session.commit()
            logger.info(f"Successfully removed {self._entity_name} with ID: {entity_id}")
        except Exception as e:
            await self.session.rollback()
            logger.error(
                f"Error removing {self._entity_name} {entity_id}: {e}", exc_info=True
            )
            raise

    async def find_by_id(self, id: Any, options: Sequence[Any] = ()) -> ModelT:
        """根據 ID 獲取記錄，找不到時拋出 RecordNotFoundError"""
        logger.debug(f"Fetching {self._entity_name} with ID: {id}")
        statement = select(self.model).where(self.model.id == id)
        if options:
            # 已在 session 中的實體也要套用預先載入選項
            statement = statement.options(*options).execution_options(
                populate_existing=True
            )
        result = await self.session.execute(statement)
        entity = result.scalar_one_or_none()
        if entity is None:
            raise RecordNotFoundError(f"{self._entity_name} {id} not found")
        return entity

    async def find_all(
        self, pagination: PaginationRequest, options: Sequence[Any] = ()
    ) -> Tuple[List[ModelT], int]:
        """依搜尋、排序與分頁參數查詢記錄，並回傳總筆數"""
        logger.debug(
            f"Fetching {self._entity_name} list (page={pagination.page}, limit={pagination.limit}, "
            f"order_by={pagination.order_by}, sort_by={pagination.sort_by}, search={pagination.search!r})"
        )

        # 基礎查詢
        statement = select(self.model)

        # 名稱模糊搜尋（不分大小寫）
        if pagination.search:
            search_column = getattr(self.model, self.search_field)
            pattern = escape_like(pagination.search)
            statement = statement.where(
                search_column.ilike(f"%{pattern}%", escape=LIKE_ESCAPE)
            )

        count_statement = sqlalchemy_select(func.count()).select_from(statement.subquery())
        total = (await self.session.execute(count_statement)).scalar_one()

        # 排序欄位必須在白名單內
        if pagination.order_by not in self.sortable_fields:
            raise ValueError(f"Unsupported order_by column: {pagination.order_by}")
        order_column = getattr(self.model, pagination.order_by)
        ordering = order_column.desc() if pagination.sort_by == "desc" else order_column.asc()

        statement = (
            statement.order_by(ordering, self.model.id)
            .offset(pagination.offset)
            .limit(pagination.limit)
        )
        if options:
            statement = statement.options(*options)

        result = await self.session.execute(statement)
        return list(result.scalars().all()), total
