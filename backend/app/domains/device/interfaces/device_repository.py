from abc import abstractmethod
from typing import Any

from app.domains.common.interfaces.repository_interface import RepositoryInterface
from app.domains.device.models.device_model import Device


class DeviceRepository(RepositoryInterface[Device]):
    """設備存儲庫接口，在通用 CRUD 之上加入名稱檢查與感測器預先載入"""

    @abstractmethod
    async def find_by_id_with_sensors(self, device_id: Any) -> Device:
        """根據 ID 獲取設備並預先載入其感測器"""
        pass

    @abstractmethod
    async def count_by_name(self, name: str) -> int:
        """計算同名設備數量"""
        pass

    @abstractmethod
    async def exists_by_name(self, name: str) -> bool:
        """檢查設備名稱是否已存在"""
        pass
