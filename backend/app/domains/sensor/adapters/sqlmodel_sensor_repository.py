import logging
from typing import Any, List, Sequence, Tuple

from sqlalchemy import func, select as sqlalchemy_select
from sqlalchemy.orm import selectinload

from app.domains.common.adapters.sqlmodel_repository import SQLModelRepository
from app.domains.common.models.pagination import PaginationRequest
from app.domains.sensor.interfaces.sensor_repository import SensorRepository
from app.domains.sensor.models.sensor_model import Sensor

logger = logging.getLogger(__name__)


class SQLModelSensorRepository(SQLModelRepository[Sensor], SensorRepository):
    """SQLModel 感測器存儲庫實現"""

    model = Sensor
    sortable_fields = ("name", "type", "unit", "is_active", "created_at", "updated_at")

    async def find_by_id_with_device(self, sensor_id: Any) -> Sensor:
        """根據 ID 獲取感測器並預先載入所屬設備"""
        return await self.find_by_id(sensor_id, options=[selectinload(Sensor.device)])

    async def find_all(
        self, pagination: PaginationRequest, options: Sequence[Any] = ()
    ) -> Tuple[List[Sensor], int]:
        """分頁查詢感測器，並預先載入所屬設備以帶出設備名稱"""
        return await super().find_all(
            pagination, options=[selectinload(Sensor.device), *options]
        )

    async def count_by_name(self, name: str) -> int:
        """計算同名感測器數量"""
        logger.debug(f"Counting sensors with name: {name}")
        stmt = sqlalchemy_select(func.count()).select_from(Sensor).where(Sensor.name == name)
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def exists_by_name(self, name: str) -> bool:
        """檢查感測器名稱是否已存在"""
        return await self.count_by_name(name) > 0
