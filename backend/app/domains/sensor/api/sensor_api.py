import logging
from typing import Any, Dict
from fastapi import APIRouter, Body, Depends, Query, status
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_session
from app.core.config import (
    DEFAULT_ORDER_BY,
    DEFAULT_PAGE,
    DEFAULT_PAGE_LIMIT,
    DEFAULT_SORT_BY,
)
from app.domains.common.utils.errors import DomainError
from app.domains.common.utils.response import WebResponse, error_response
from app.domains.sensor.adapters.sqlmodel_sensor_repository import (
    SQLModelSensorRepository,
)
from app.domains.sensor.services.sensor_service import SensorService

logger = logging.getLogger(__name__)
router = APIRouter()

SENSOR_NOT_FOUND = "sensor not found"


async def get_sensor_service(
    session: AsyncSession = Depends(get_session),
) -> SensorService:
    """獲取感測器服務實例，用於依賴注入"""
    repository = SQLModelSensorRepository(session=session)
    return SensorService(sensor_repository=repository)


@router.post("", status_code=status.HTTP_201_CREATED, response_model=WebResponse)
async def create_sensor(
    *,
    sensor_service: SensorService = Depends(get_sensor_service),
    payload: Dict[str, Any] = Body(..., description="CreateSensorRequest"),
) -> JSONResponse:
    """
    創建一個新的感測器。
    """
    logger.info(f"API: Received request to create sensor: {payload.get('name')}")
    try:
        sensor = await sensor_service.create_sensor(payload)
    except DomainError as e:
        logger.warning(f"Failed to create sensor : {e}")
        return error_response(e)

    return WebResponse.success(
        status.HTTP_201_CREATED, "sensor created successfully", sensor
    ).to_response()


@router.get("", response_model=WebResponse)
async def read_sensors(
    sensor_service: SensorService = Depends(get_sensor_service),
    page: int = Query(DEFAULT_PAGE, description="Page number"),
    limit: int = Query(DEFAULT_PAGE_LIMIT, description="Number of items per page"),
    order_by: str = Query(DEFAULT_ORDER_BY, description="Field to order by"),
    sort_by: str = Query(DEFAULT_SORT_BY, description="Sort direction (asc or desc)"),
    search: str = Query("", description="Search term matched against the name"),
) -> JSONResponse:
    """
    分頁獲取感測器列表，每筆帶出所屬設備名稱。
    """
    logger.info(
        f"API: Received request to read sensors (page={page}, limit={limit}, order_by={order_by}, sort_by={sort_by}, search={search!r})"
    )
    try:
        sensors, pagination = await sensor_service.get_sensors(
            {
                "page": page,
                "limit": limit,
                "order_by": order_by,
                "sort_by": sort_by,
                "search": search,
            }
        )
    except DomainError as e:
        logger.warning(f"Failed to list sensors : {e}")
        return error_response(e)

    return WebResponse.success_with_pagination(
        status.HTTP_200_OK, "get list sensor successfully", sensors, pagination
    ).to_response()


@router.get("/{sensor_id}", response_model=WebResponse)
async def read_sensor_by_id(
    sensor_id: str,
    sensor_service: SensorService = Depends(get_sensor_service),
) -> JSONResponse:
    """
    根據 ID 獲取單個感測器。
    """
    logger.info(f"API: Received request to read sensor with ID: {sensor_id}")
    try:
        sensor = await sensor_service.get_sensor_by_id(sensor_id)
    except DomainError as e:
        logger.warning(f"Failed to read sensor {sensor_id} : {e}")
        return error_response(e, not_found_message=SENSOR_NOT_FOUND)

    return WebResponse.success(
        status.HTTP_200_OK, "get detail sensor successfully", sensor
    ).to_response()


@router.put("/{sensor_id}", response_model=WebResponse)
async def update_sensor(
    *,
    sensor_id: str,
    sensor_service: SensorService = Depends(get_sensor_service),
    payload: Dict[str, Any] = Body(..., description="UpdateSensorRequest"),
) -> JSONResponse:
    """
    更新現有感測器，只套用請求中出現的欄位。
    """
    logger.info(f"API: Received request to update sensor with ID: {sensor_id}")
    try:
        await sensor_service.update_sensor(sensor_id, payload)
    except DomainError as e:
        logger.warning(f"Failed to update sensor {sensor_id} : {e}")
        return error_response(e, not_found_message=SENSOR_NOT_FOUND)

    return WebResponse.default_success(
        status.HTTP_200_OK, "update sensor successfully"
    ).to_response()


@router.delete("/{sensor_id}", response_model=WebResponse)
async def delete_sensor(
    *,
    sensor_id: str,
    sensor_service: SensorService = Depends(get_sensor_service),
) -> JSONResponse:
    """
    刪除一個感測器。
    """
    logger.info(f"API: Received request to delete sensor with ID: {sensor_id}")
    try:
        await sensor_service.delete_sensor(sensor_id)
    except DomainError as e:
        logger.warning(f"Failed to delete sensor {sensor_id} : {e}")
        return error_response(e, not_found_message=SENSOR_NOT_FOUND)

    return WebResponse.default_success(
        status.HTTP_200_OK, "delete sensor successfully"
    ).to_response()
