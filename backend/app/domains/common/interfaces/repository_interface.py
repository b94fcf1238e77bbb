from abc import ABC, abstractmethod
from typing import Any, Generic, List, Sequence, Tuple, TypeVar

from app.domains.common.models.pagination import PaginationRequest

T = TypeVar("T")


class RecordNotFoundError(LookupError):
    """儲存庫找不到指定記錄時拋出"""


class RepositoryInterface(Generic[T], ABC):
    """通用的儲存庫接口，定義基本的CRUD與分頁操作"""

    # 允許作為 order_by 的欄位白名單
    sortable_fields: Tuple[str, ...] = ()

    @abstractmethod
    async def create(self, entity: T) -> T:
        """創建新實體

        Args:
            entity: 要創建的實體

        Returns:
            創建後的實體（包含生成的ID與時間戳）
        """
        pass

    @abstractmethod
    async def update(self, entity: T) -> T:
        """更新實體

        Args:
            entity: 已修改的實體

        Returns:
            更新後的實體
        """
        pass

    @abstractmethod
    async def delete(self, entity: T) -> None:
        """刪除實體

        Args:
            entity: 要刪除的實體
        """
        pass

    @abstractmethod
    async def find_by_id(self, id: Any, options: Sequence[Any] = ()) -> T:
        """通過ID獲取實體

        Args:
            id: 實體唯一標識符
            options: 額外的載入選項（例如預先載入關聯）

        Returns:
            找到的實體

        Raises:
            RecordNotFoundError: 找不到實體時
        """
        pass

    @abstractmethod
    async def find_all(
        self, pagination: PaginationRequest, options: Sequence[Any] = ()
    ) -> Tuple[List[T], int]:
        """依分頁參數查詢實體

        Args:
            pagination: 已驗證的分頁參數（搜尋、排序、頁碼）
            options: 額外的載入選項

        Returns:
            (當頁實體列表, 符合條件的總筆數)
        """
        pass
