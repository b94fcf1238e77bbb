import asyncio
import functools
import logging
from typing import Any, Awaitable, Callable, TypeVar

from app.domains.common.utils.errors import InternalError

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Awaitable[Any]])


def with_deadline(func: F) -> F:
    """以服務實例的 ``timeout`` 秒數限制用例方法的執行時間

    逾時會取消進行中的資料庫呼叫並拋出 InternalError，不做重試。
    """

    @functools.wraps(func)
    async def wrapper(self, *args, **kwargs):
        timeout = self.timeout
        try:
            return await asyncio.wait_for(func(self, *args, **kwargs), timeout=timeout)
        except asyncio.TimeoutError as e:
            logger.warning(
                f"{type(self).__name__}.{func.__name__} exceeded deadline of {timeout}s"
            )
            raise InternalError(f"{func.__name__} timed out after {timeout}s") from e

    return wrapper  # type: ignore[return-value]
