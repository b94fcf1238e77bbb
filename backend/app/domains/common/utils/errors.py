import logging
import uuid
from contextlib import contextmanager
from enum import Enum
from typing import Any, Iterator, Optional

from sqlalchemy.exc import SQLAlchemyError

from app.domains.common.interfaces.repository_interface import RecordNotFoundError

logger = logging.getLogger(__name__)


class ErrorKind(str, Enum):
    """領域錯誤種類"""

    VALIDATION = "validation"
    CONFLICT = "conflict"
    NOT_FOUND = "not_found"
    INTERNAL = "internal"


class DomainError(Exception):
    """用例層拋出的錯誤基類，控制器只依據 kind 判斷"""

    kind: ErrorKind = ErrorKind.INTERNAL

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationFailedError(DomainError):
    kind = ErrorKind.VALIDATION


class ConflictError(DomainError):
    kind = ErrorKind.CONFLICT


class NotFoundError(DomainError):
    kind = ErrorKind.NOT_FOUND


class InternalError(DomainError):
    kind = ErrorKind.INTERNAL


@contextmanager
def translate_storage_errors(
    entity_name: str, entity_id: Optional[Any] = None
) -> Iterator[None]:
    """將儲存層錯誤轉換為領域錯誤

    RecordNotFoundError 轉為 NotFoundError，其餘 SQLAlchemy 錯誤轉為 InternalError。
    """
    try:
        yield
    except RecordNotFoundError as e:
        logger.info(f"{entity_name.capitalize()} not found, id={entity_id}")
        raise NotFoundError(f"{entity_name} not found") from e
    except SQLAlchemyError as e:
        logger.warning(f"Storage failure on {entity_name} (id={entity_id}): {e}")
        raise InternalError(str(e)) from e


def parse_identifier(raw_id: Any, entity_name: str) -> uuid.UUID:
    """解析路徑中的 ID；格式錯誤的 ID 不可能對應任何記錄，視為 NotFound"""
    if isinstance(raw_id, uuid.UUID):
        return raw_id
    try:
        return uuid.UUID(str(raw_id))
    except ValueError as e:
        logger.info(f"{entity_name.capitalize()} not found, malformed id={raw_id}")
        raise NotFoundError(f"{entity_name} not found") from e
