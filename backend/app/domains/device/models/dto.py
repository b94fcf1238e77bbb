"""
設備領域 DTO（資料傳輸物件）
"""

from typing import List, Optional
from pydantic import Field

from app.domains.common.models.base_model import DomainBaseModel
from app.domains.sensor.models.dto import SensorResponse


class DeviceCreate(DomainBaseModel):
    """創建設備的資料傳輸對象"""

    name: str = Field(..., min_length=1, max_length=100, description="設備名稱（唯一）")
    location: Optional[str] = Field(default=None, max_length=150, description="設備位置")
    status: Optional[str] = Field(default=None, max_length=50, description="設備狀態，預設 active")


class DeviceUpdate(DomainBaseModel):
    """更新設備的資料傳輸對象，只有出現且非 null 的欄位會被套用"""

    name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    location: Optional[str] = Field(default=None, max_length=150)
    status: Optional[str] = Field(default=None, max_length=50)


class DeviceResponse(DomainBaseModel):
    """設備響應的資料傳輸對象"""

    id: str
    name: str
    location: Optional[str] = None
    status: Optional[str] = None
    sensors: Optional[List[SensorResponse]] = None
    created_at: str
    updated_at: str
