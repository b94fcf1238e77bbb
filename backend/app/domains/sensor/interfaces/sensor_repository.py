from abc import abstractmethod
from typing import Any

from app.domains.common.interfaces.repository_interface import RepositoryInterface
from app.domains.sensor.models.sensor_model import Sensor


class SensorRepository(RepositoryInterface[Sensor]):
    """感測器存儲庫接口，在通用 CRUD 之上加入名稱檢查與設備預先載入"""

    @abstractmethod
    async def find_by_id_with_device(self, sensor_id: Any) -> Sensor:
        """根據 ID 獲取感測器並預先載入所屬設備"""
        pass

    @abstractmethod
    async def count_by_name(self, name: str) -> int:
        """計算同名感測器數量"""
        pass

    @abstractmethod
    async def exists_by_name(self, name: str) -> bool:
        """檢查感測器名稱是否已存在"""
        pass
