"""
請求驗證工具

以 pydantic 模型描述請求結構與欄位限制，並把 pydantic 的錯誤列表
轉換成一段以逗號連接、可直接回傳給客戶端的訊息。
"""

import logging
from typing import Any, Dict, List, Mapping, Optional, Type, TypeVar, Union

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from app.domains.common.utils.errors import ValidationFailedError

logger = logging.getLogger(__name__)

RequestT = TypeVar("RequestT", bound=BaseModel)


def _field_label(loc) -> str:
    parts = [str(part) for part in loc if part != "__root__"]
    return ".".join(parts) if parts else "request"


def translate_error(error: Mapping[str, Any]) -> str:
    """將單一 pydantic 錯誤轉換為可讀訊息"""
    field = _field_label(error.get("loc", ()))
    error_type = error.get("type", "")
    ctx = error.get("ctx") or {}

    if error_type == "missing":
        return f"{field} is a required field"
    if error_type == "string_too_short":
        if ctx.get("min_length") == 1:
            return f"{field} is a required field"
        return f"{field} must be at least {ctx.get('min_length')} characters in length"
    if error_type == "string_too_long":
        return f"{field} must be a maximum of {ctx.get('max_length')} characters in length"
    if error_type in ("uuid_parsing", "uuid_type", "uuid_version"):
        return f"{field} must be a valid UUID"
    if error_type == "string_type":
        return f"{field} must be a string"
    if error_type in ("bool_type", "bool_parsing"):
        return f"{field} must be a boolean"
    if error_type in ("int_type", "int_parsing", "int_from_float"):
        return f"{field} must be an integer"
    if error_type == "greater_than_equal":
        return f"{field} must be {ctx.get('ge')} or greater"
    if error_type == "less_than_equal":
        return f"{field} must be {ctx.get('le')} or less"
    if error_type == "literal_error":
        return f"{field} must be one of {ctx.get('expected')}"
    if error_type == "model_type" or error_type == "dict_type":
        return f"{field} must be a JSON object"
    if error_type == "value_error" and "error" in ctx:
        return f"{field} {ctx['error']}"
    return f"{field} {str(error.get('msg', 'is invalid')).lower()}"


class Validator:
    """請求驗證器"""

    def translate(self, exc: PydanticValidationError) -> List[str]:
        return [translate_error(error) for error in exc.errors()]

    def validate(
        self,
        model: Type[RequestT],
        data: Union[RequestT, Dict[str, Any], None],
        context: Optional[Dict[str, Any]] = None,
    ) -> RequestT:
        """驗證輸入並回傳型別化的請求物件

        Args:
            model: 請求模型類別
            data: 原始字典或已建立的請求物件
            context: 傳給欄位驗證器的上下文

        Raises:
            ValidationFailedError: 收集所有欄位錯誤後一次拋出
        """
        if isinstance(data, model) and context is None:
            return data
        if isinstance(data, BaseModel):
            data = data.model_dump(exclude_unset=True)

        try:
            return model.model_validate(data, context=context)
        except PydanticValidationError as e:
            messages = self.translate(e)
            logger.debug(f"Validation failed for {model.__name__}: {messages}")
            raise ValidationFailedError(", ".join(messages)) from e


# 全域驗證器實例
validator = Validator()
