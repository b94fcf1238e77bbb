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
from app.domains.sensor.interfaces.sensor_repository import SensorRepository
from app.domains.sensor.models.converter import sensor_to_response
from app.domains.sensor.models.dto import SensorCreate, SensorResponse, SensorUpdate
from app.domains.sensor.models.sensor_model import Sensor

logger = logging.getLogger(__name__)


class SensorService:
    """感測器服務層，實現感測器相關的業務邏輯"""

    def __init__(
        self,
        sensor_repository: SensorRepository,
        validator: Validator = default_validator,
        timeout: float = USECASE_TIMEOUT_SECONDS,
    ):
        self.sensor_repository = sensor_repository
        self.validator = validator
        self.timeout = timeout

    @with_deadline
    async def create_sensor(
        self, sensor_data: Union[SensorCreate, Dict[str, Any]]
    ) -> SensorResponse:
        """創建新感測器

        device_id 只檢查格式；所屬設備是否存在交由資料庫外鍵約束，
        違反時以內部錯誤回報。
        """
        sensor_in = self.validator.validate(SensorCreate, sensor_data)

        with translate_storage_errors("sensor"):
            exists = await self.sensor_repository.exists_by_name(sensor_in.name)
        if exists:
            logger.warning(f"Sensor name '{sensor_in.name}' already exists.")
            raise ConflictError("sensor name already exist")

        sensor = Sensor(
            device_id=sensor_in.device_id,
            name=sensor_in.name,
            type=sensor_in.type,
            unit=sensor_in.unit,
            is_active=True if sensor_in.is_active is None else sensor_in.is_active,
        )
        with translate_storage_errors("sensor", sensor.id):
            await self.sensor_repository.create(sensor)
            created = await self.sensor_repository.find_by_id_with_device(sensor.id)

        return sensor_to_response(created)

    @with_deadline
    async def get_sensors(
        self, pagination_data: Union[PaginationRequest, Dict[str, Any], None] = None
    ) -> Tuple[List[SensorResponse], PaginationResponse]:
        """分頁獲取感測器列表，可依名稱搜尋"""
        pagination = self.validator.validate(
            PaginationRequest,
            pagination_data or {},
            context={"sortable_fields": self.sensor_repository.sortable_fields},
        )

        with translate_storage_errors("sensor"):
            sensors, total = await self.sensor_repository.find_all(pagination)

        responses = [sensor_to_response(sensor) for sensor in sensors]
        return responses, PaginationResponse.from_request(pagination, total)

    @with_deadline
    async def get_sensor_by_id(self, sensor_id: Any) -> SensorResponse:
        """根據 ID 獲取感測器及所屬設備名稱"""
        identifier = parse_identifier(sensor_id, "sensor")
        with translate_storage_errors("sensor", identifier):
            sensor = await self.sensor_repository.find_by_id_with_device(identifier)
        return sensor_to_response(sensor)

    @with_deadline
    async def update_sensor(
        self, sensor_id: Any, sensor_data: Union[SensorUpdate, Dict[str, Any]]
    ) -> SensorResponse:
        """更新感測器資訊，只套用請求中出現且非 null 的欄位"""
        identifier = parse_identifier(sensor_id, "sensor")
        with translate_storage_errors("sensor", identifier):
            sensor = await self.sensor_repository.find_by_id(identifier)

        sensor_in = self.validator.validate(SensorUpdate, sensor_data)
        changes = sensor_in.model_dump(exclude_unset=True, exclude_none=True)

        new_name: Optional[str] = changes.get("name")
        if new_name is not None and new_name != sensor.name:
            with translate_storage_errors("sensor", identifier):
                exists = await self.sensor_repository.exists_by_name(new_name)
            if exists:
                logger.warning(f"Sensor name '{new_name}' already exists.")
                raise ConflictError("sensor name already exist")

        for field, value in changes.items():
            setattr(sensor, field, value)

        with translate_storage_errors("sensor", identifier):
            await self.sensor_repository.update(sensor)
            updated = await self.sensor_repository.find_by_id_with_device(identifier)
        return sensor_to_response(updated)

    @with_deadline
    async def delete_sensor(self, sensor_id: Any) -> None:
        """刪除感測器"""
        identifier = parse_identifier(sensor_id, "sensor")
        with translate_storage_errors("sensor", identifier):
            sensor = await self.sensor_repository.find_by_id(identifier)
            await self.sensor_repository.delete(sensor)
