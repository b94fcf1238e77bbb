from typing import TYPE_CHECKING, List, Optional
from sqlmodel import Field, Relationship

from app.domains.common.models.base_model import AuditableEntity

if TYPE_CHECKING:
    from app.domains.sensor.models.sensor_model import Sensor


DEFAULT_DEVICE_STATUS = "active"


# Represents the table structure
class Device(AuditableEntity, table=True):
    """設備實體模型，對應資料庫中的 devices 表"""

    __tablename__ = "devices"

    name: str = Field(max_length=100, nullable=False, unique=True, index=True)
    location: Optional[str] = Field(default=None, max_length=150)
    status: Optional[str] = Field(default=DEFAULT_DEVICE_STATUS, max_length=50)

    # 感測器由資料庫外鍵 ON DELETE CASCADE 一併刪除，未載入時不逐筆讀取
    sensors: List["Sensor"] = Relationship(
        back_populates="device",
        sa_relationship_kwargs={
            "cascade": "all, delete-orphan",
            "passive_deletes": True,
        },
    )
