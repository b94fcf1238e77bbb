import uuid
from typing import TYPE_CHECKING, Optional
from sqlalchemy import Column, ForeignKey, Uuid
from sqlmodel import Field, Relationship

from app.domains.common.models.base_model import AuditableEntity

if TYPE_CHECKING:
    from app.domains.device.models.device_model import Device


class Sensor(AuditableEntity, table=True):
    """感測器實體模型，對應資料庫中的 sensors 表"""

    __tablename__ = "sensors"

    device_id: uuid.UUID = Field(
        sa_column=Column(
            Uuid,
            ForeignKey("devices.id", onupdate="CASCADE", ondelete="CASCADE"),
            nullable=False,
            index=True,
        )
    )
    name: str = Field(max_length=100, nullable=False, unique=True, index=True)
    type: str = Field(max_length=50, nullable=False)
    unit: Optional[str] = Field(default=None, max_length=20)
    is_active: bool = Field(default=True, nullable=False)

    device: Optional["Device"] = Relationship(back_populates="sensors")
