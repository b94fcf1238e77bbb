from typing import Any, Optional

from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from app.domains.common.models.pagination import PaginationResponse
from app.domains.common.utils.errors import DomainError, ErrorKind

INTERNAL_ERROR_MESSAGE = "internal server error"

# 錯誤種類對應的 HTTP 狀態碼
STATUS_BY_KIND = {
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.INTERNAL: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


class WebResponse(BaseModel):
    """統一的響應信封

    成功時可僅有訊息、附帶資料，或同時附帶資料與分頁資訊；
    失敗時只有 code 與 message。
    """

    code: int = Field(..., description="HTTP 狀態碼")
    message: str = Field(..., description="結果訊息")
    data: Optional[Any] = Field(None, description="結果數據")
    pagination: Optional[PaginationResponse] = Field(None, description="分頁資訊")

    @classmethod
    def default_success(cls, code: int, message: str) -> "WebResponse":
        return cls(code=code, message=message)

    @classmethod
    def success(cls, code: int, message: str, data: Any) -> "WebResponse":
        return cls(code=code, message=message, data=data)

    @classmethod
    def success_with_pagination(
        cls, code: int, message: str, data: Any, pagination: PaginationResponse
    ) -> "WebResponse":
        return cls(code=code, message=message, data=data, pagination=pagination)

    @classmethod
    def error(cls, code: int, message: str) -> "WebResponse":
        return cls(code=code, message=message)

    def to_response(self) -> JSONResponse:
        content = jsonable_encoder(self, exclude_none=True)
        return JSONResponse(status_code=self.code, content=content)


def error_response(error: DomainError, not_found_message: Optional[str] = None) -> JSONResponse:
    """依錯誤種類產生錯誤響應；內部錯誤不暴露儲存層訊息"""
    code = STATUS_BY_KIND.get(error.kind, status.HTTP_500_INTERNAL_SERVER_ERROR)
    if error.kind == ErrorKind.INTERNAL:
        message = INTERNAL_ERROR_MESSAGE
    elif error.kind == ErrorKind.NOT_FOUND and not_found_message:
        message = not_found_message
    else:
        message = error.message
    return WebResponse.error(code, message).to_response()
