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
from app.domains.device.adapters.sqlmodel_device_repository import (
    SQLModelDeviceRepository,
)
from app.domains.device.services.device_service import DeviceService

logger = logging.getLogger(__name__)
router = APIRouter()

DEVICE_NOT_FOUND = "device not found"


# 依賴注入函數，創建設備服務實例
async def get_device_service(
    session: AsyncSession = Depends(get_session),
) -> DeviceService:
    """獲取設備服務實例，用於依賴注入"""
    repository = SQLModelDeviceRepository(session=session)
    return DeviceService(device_repository=repository)


@router.post("", status_code=status.HTTP_201_CREATED, response_model=WebResponse)
async def create_device(
    *,
    device_service: DeviceService = Depends(get_device_service),
    payload: Dict[str, Any] = Body(..., description="CreateDeviceRequest"),
) -> JSONResponse:
    """
    創建一個新的設備。
    """
    logger.info(f"API: Received request to create device: {payload.get('name')}")
    try:
        device = await device_service.create_device(payload)
    except DomainError as e:
        logger.warning(f"Failed to create device : {e}")
        return error_response(e)

    return WebResponse.success(
        status.HTTP_201_CREATED, "device created successfully", device
    ).to_response()


@router.get("", response_model=WebResponse)
async def read_devices(
    device_service: DeviceService = Depends(get_device_service),
    page: int = Query(DEFAULT_PAGE, description="Page number"),
    limit: int = Query(DEFAULT_PAGE_LIMIT, description="Number of items per page"),
    order_by: str = Query(DEFAULT_ORDER_BY, description="Field to order by"),
    sort_by: str = Query(DEFAULT_SORT_BY, description="Sort direction (asc or desc)"),
    search: str = Query("", description="Search term matched against the name"),
) -> JSONResponse:
    """
    分頁獲取設備列表，可依名稱搜尋。
    """
    logger.info(
        f"API: Received request to read devices (page={page}, limit={limit}, order_by={order_by}, sort_by={sort_by}, search={search!r})"
    )
    try:
        devices, pagination = await device_service.get_devices(
            {
                "page": page,
                "limit": limit,
                "order_by": order_by,
                "sort_by": sort_by,
                "search": search,
            }
        )
    except DomainError as e:
        logger.warning(f"Failed to list devices : {e}")
        return error_response(e)

    return WebResponse.success_with_pagination(
        status.HTTP_200_OK, "get list device successfully", devices, pagination
    ).to_response()


@router.get("/{device_id}", response_model=WebResponse)
async def read_device_by_id(
    device_id: str,
    device_service: DeviceService = Depends(get_device_service),
) -> JSONResponse:
    """
    根據 ID 獲取單個設備，包含其感測器。
    """
    logger.info(f"API: Received request to read device with ID: {device_id}")
    try:
        device = await device_service.get_device_by_id(device_id)
    except DomainError as e:
        logger.warning(f"Failed to read device {device_id} : {e}")
        return error_response(e, not_found_message=DEVICE_NOT_FOUND)

    return WebResponse.success(
        status.HTTP_200_OK, "get detail device successfully", device
    ).to_response()


@router.put("/{device_id}", response_model=WebResponse)
async def update_device(
    *,
    device_id: str,
    device_service: DeviceService = Depends(get_device_service),
    payload: Dict[str, Any] = Body(..., description="UpdateDeviceRequest"),
) -> JSONResponse:
    """
    更新現有設備，只套用請求中出現的欄位。
    """
    logger.info(f"API: Received request to update device with ID: {device_id}")
    try:
        await device_service.update_device(device_id, payload)
    except DomainError as e:
        logger.warning(f"Failed to update device {device_id} : {e}")
        return error_response(e, not_found_message=DEVICE_NOT_FOUND)

    return WebResponse.default_success(
        status.HTTP_200_OK, "update device successfully"
    ).to_response()


@router.delete("/{device_id}", response_model=WebResponse)
async def delete_device(
    *,
    device_id: str,
    device_service: DeviceService = Depends(get_device_service),
) -> JSONResponse:
    """
    刪除一個設備，其感測器一併刪除。
    """
    logger.info(f"API: Received request to delete device with ID: {device_id}")
    try:
        await device_service.delete_device(device_id)
    except DomainError as e:
        logger.warning(f"Failed to delete device {device_id} : {e}")
        return error_response(e, not_found_message=DEVICE_NOT_FOUND)

    return WebResponse.default_success(
        status.HTTP_200_OK, "delete device successfully"
    ).to_response()
