from datetime import datetime, timezone
from pydantic import BaseModel, ConfigDict
from sqlalchemy import DateTime
from sqlmodel import Field, SQLModel
import uuid


def utcnow() -> datetime:
    """帶時區的 UTC 時間，對應資料庫的 TIMESTAMP WITH TIME ZONE"""
    return datetime.now(timezone.utc)


class DomainBaseModel(BaseModel):
    """所有請求/響應資料傳輸對象的基類"""

    model_config = ConfigDict(
        populate_by_name=True,
        str_strip_whitespace=True,
    )


class AuditableEntity(SQLModel):
    """可審計實體，具有 UUID 主鍵以及創建和修改時間戳"""

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    # sa_type 讓每張表各自建立欄位，不共用同一個 Column 物件
    created_at: datetime = Field(
        default_factory=utcnow, sa_type=DateTime(timezone=True), nullable=False
    )
    updated_at: datetime = Field(
        default_factory=utcnow, sa_type=DateTime(timezone=True), nullable=False
    )
