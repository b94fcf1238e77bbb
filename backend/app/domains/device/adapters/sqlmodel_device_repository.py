import logging
from typing import Any

from sqlalchemy import func, select as sqlalchemy_select
from sqlalchemy.orm import selectinload

from app.domains.common.adapters.sqlmodel_repository import SQLModelRepository
from app.domains.device.interfaces.device_repository import DeviceRepository
from app.domains.device.models.device_model import Device

logger = logging.getLogger(__name__)


class SQLModelDeviceRepository(SQLModelRepository[Device], DeviceRepository):
    """SQLModel 設備存儲庫實現"""

    model = Device
    sortable_fields = ("name", "location", "status", "created_at", "updated_at")

    async def find_by_id_with_sensors(self, device_id: Any) -> Device:
        """根據 ID 獲取設備並預先載入其感測器"""
        return await self.find_by_id(device_id, options=[selectinload(Device.sensors)])

    async def count_by_name(self, name: str) -> int:
        """計算同名設備數量"""
        logger.debug(f"Counting devices with name: {name}")
        stmt = sqlalchemy_select(func.count()).select_from(Device).where(Device.name == name)
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def exists_by_name(self, name: str) -> bool:
        """檢查設備名稱是否已存在"""
        return await self.count_by_name(name) > 0
