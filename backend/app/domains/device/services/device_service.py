import logging
from typing import Any, Dict, List, Optional, Tuple, Union

from app.core.config import USECASE_TIMEOUT_SECONDS
from app.domains.common.models.pagination import PaginationRequest, PaginationResponse
from app.domains.common.utils.deadline import with_deadline
from app.domains.common.utils.errors import (
    ConflictError,
    parse_identifier,
    translate_storage_errors,
)
from app.domains.common.utils.validator import Validator, validator as default_validator
from app.domains.device.interfaces.device_repository import DeviceRepository
from app.domains.device.models.converter import device_to_response
from app.domains.device.models.device_model import DEFAULT_DEVICE_STATUS, Device
from app.domains.device.models.dto import DeviceCreate, DeviceResponse, DeviceUpdate

logger = logging.getLogger(__name__)


class DeviceService:
    """設備服務層，實現設備相關的業務邏輯

    每個公開方法都受 ``timeout`` 秒的期限約束，從進入用例時起算。
    """

    def __init__(
        self,
        device_repository: DeviceRepository,
        validator: Validator = default_validator,
        timeout: float = USECASE_TIMEOUT_SECONDS,
    ):
        self.device_repository = device_repository
        self.validator = validator
        self.timeout = timeout

    @with_deadline
    async def create_device(
        self, device_data: Union[DeviceCreate, Dict[str, Any]]
    ) -> DeviceResponse:
        """創建新設備，並檢查名稱是否已存在"""
        device_in = self.validator.validate(DeviceCreate, device_data)

        with translate_storage_errors("device"):
            exists = await self.device_repository.exists_by_name(device_in.name)
        if exists:
            logger.warning(f"Device name '{device_in.name}' already exists.")
            raise ConflictError("device name already exist")

        device = Device(
            name=device_in.name,
            location=device_in.location,
            status=device_in.status or DEFAULT_DEVICE_STATUS,
        )
        with translate_storage_errors("device", device.id):
            created = await self.device_repository.create(device)

        return device_to_response(created)

    @with_deadline
    async def get_devices(
        self, pagination_data: Union[PaginationRequest, Dict[str, Any], None] = None
    ) -> Tuple[List[DeviceResponse], PaginationResponse]:
        """分頁獲取設備列表，可依名稱搜尋"""
        pagination = self.validator.validate(
            PaginationRequest,
            pagination_data or {},
            context={"sortable_fields": self.device_repository.sortable_fields},
        )

        with translate_storage_errors("device"):
            devices, total = await self.device_repository.find_all(pagination)

        responses = [device_to_response(device) for device in devices]
        return responses, PaginationResponse.from_request(pagination, total)

    @with_deadline
    async def get_device_by_id(self, device_id: Any) -> DeviceResponse:
        """根據 ID 獲取設備及其感測器，不存在時拋出 NotFoundError"""
        identifier = parse_identifier(device_id, "device")
        with translate_storage_errors("device", identifier):
            device = await self.device_repository.find_by_id_with_sensors(identifier)
        return device_to_response(device, include_sensors=True)

    @with_deadline
    async def update_device(
        self, device_id: Any, device_data: Union[DeviceUpdate, Dict[str, Any]]
    ) -> DeviceResponse:
        """更新設備資訊，只套用請求中出現且非 null 的欄位"""
        identifier = parse_identifier(device_id, "device")
        # 先確認設備存在，再驗證更新內容
        with translate_storage_errors("device", identifier):
            device = await self.device_repository.find_by_id(identifier)

        device_in = self.validator.validate(DeviceUpdate, device_data)
        changes = device_in.model_dump(exclude_unset=True, exclude_none=True)

        new_name: Optional[str] = changes.get("name")
        if new_name is not None and new_name != device.name:
            with translate_storage_errors("device", identifier):
                exists = await self.device_repository.exists_by_name(new_name)
            if exists:
                logger.warning(f"Device name '{new_name}' already exists.")
                raise ConflictError("device name already exist")

        for field, value in changes.items():
            setattr(device, field, value)

        with translate_storage_errors("device", identifier):
            updated = await self.device_repository.update(device)
        return device_to_response(updated)

    @with_deadline
    async def delete_device(self, device_id: Any) -> None:
        """刪除設備，其感測器由資料庫級聯刪除"""
        identifier = parse_identifier(device_id, "device")
        with translate_storage_errors("device", identifier):
            device = await self.device_repository.find_by_id(identifier)
            await self.device_repository.delete(device)
