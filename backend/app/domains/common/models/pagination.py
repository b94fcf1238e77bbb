import math
from typing import Literal
from pydantic import Field, ValidationInfo, field_validator

from app.core.config import (
    DEFAULT_ORDER_BY,
    DEFAULT_PAGE,
    DEFAULT_PAGE_LIMIT,
    DEFAULT_SORT_BY,
)
from app.domains.common.models.base_model import DomainBaseModel

# 上限確保 (page - 1) * limit 不超出 64 位元整數
MAX_PAGE = 1_000_000
MAX_PAGE_LIMIT = 1_000


class PaginationRequest(DomainBaseModel):
    """分頁查詢參數

    order_by 會以驗證上下文中的 ``sortable_fields`` 白名單檢查，
    避免任意欄位名稱被帶入 ORDER BY。
    """

    page: int = Field(default=DEFAULT_PAGE, ge=1, le=MAX_PAGE)
    limit: int = Field(default=DEFAULT_PAGE_LIMIT, ge=1, le=MAX_PAGE_LIMIT)
    order_by: str = Field(default=DEFAULT_ORDER_BY)
    sort_by: Literal["asc", "desc"] = Field(default=DEFAULT_SORT_BY)
    search: str = Field(default="")

    @field_validator("sort_by", mode="before")
    @classmethod
    def normalize_sort_by(cls, value):
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("order_by")
    @classmethod
    def check_order_by(cls, value: str, info: ValidationInfo) -> str:
        sortable_fields = (info.context or {}).get("sortable_fields")
        if sortable_fields is not None and value not in sortable_fields:
            raise ValueError(f"must be one of [{' '.join(sortable_fields)}]")
        return value

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


class PaginationResponse(DomainBaseModel):
    """分頁響應的中繼資料"""

    page: int
    limit: int
    order_by: str
    sort_by: str
    search: str
    total_data: int
    total_page: int

    @classmethod
    def from_request(cls, request: PaginationRequest, total: int) -> "PaginationResponse":
        return cls(
            page=request.page,
            limit=request.limit,
            order_by=request.order_by,
            sort_by=request.sort_by,
            search=request.search,
            total_data=total,
            total_page=math.ceil(total / request.limit),
        )
