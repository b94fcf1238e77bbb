"""
感測器領域 DTO（資料傳輸物件）
"""

import uuid
from typing import Optional
from pydantic import Field

from app.domains.common.models.base_model import DomainBaseModel


class SensorCreate(DomainBaseModel):
    """創建感測器的資料傳輸對象"""

    device_id: uuid.UUID = Field(..., description="所屬設備 ID")
    name: str = Field(..., min_length=1, max_length=100, description="感測器名稱（唯一）")
    type: str = Field(..., min_length=1, max_length=50, description="感測器類型")
    unit: Optional[str] = Field(default=None, max_length=20, description="量測單位")
    is_active: Optional[bool] = Field(default=None, description="是否啟用，預設 true")


class SensorUpdate(DomainBaseModel):
    """更新感測器的資料傳輸對象，只有出現且非 null 的欄位會被套用"""

    name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    type: Optional[str] = Field(default=None, min_length=1, max_length=50)
    unit: Optional[str] = Field(default=None, max_length=20)
    is_active: Optional[bool] = None


class SensorResponse(DomainBaseModel):
    """感測器響應的資料傳輸對象"""

    id: str
    device_id: str
    device_name: Optional[str] = None
    name: str
    type: str
    unit: Optional[str] = None
    is_active: bool
    created_at: str
    updated_at: str
