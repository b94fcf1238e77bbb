"""
Tests for DeviceService against a real SQLModel repository
"""

import asyncio
import uuid
from datetime import datetime, timedelta, timezone

import pytest

from app.domains.common.models.pagination import PaginationRequest
from app.domains.common.utils.errors import (
    ConflictError,
    InternalError,
    NotFoundError,
    ValidationFailedError,
)
from app.domains.device.adapters.sqlmodel_device_repository import (
    SQLModelDeviceRepository,
)
from app.domains.device.models.dto import DeviceCreate
from app.domains.device.services.device_service import DeviceService

pytestmark = pytest.mark.anyio


@pytest.fixture
def device_service(session):
    return DeviceService(device_repository=SQLModelDeviceRepository(session=session))


class SlowDeviceRepository(SQLModelDeviceRepository):
    """exists_by_name 永遠不會及時回應的儲存庫"""

    async def exists_by_name(self, name: str) -> bool:
        await asyncio.sleep(1)
        return False


async def test_create_device_defaults_status(device_service):
    device = await device_service.create_device({"name": "gateway-01"})

    assert uuid.UUID(device.id)
    assert device.status == "active"
    assert device.location is None
    assert device.sensors is None


async def test_create_device_accepts_typed_request(device_service):
    device = await device_service.create_device(
        DeviceCreate(name="gateway-02", location="Lab", status="inactive")
    )

    assert device.location == "Lab"
    assert device.status == "inactive"


async def test_create_device_joins_validation_messages(device_service):
    with pytest.raises(ValidationFailedError) as exc_info:
        await device_service.create_device({"location": "l" * 151})

    assert exc_info.value.message == (
        "name is a required field, "
        "location must be a maximum of 150 characters in length"
    )


async def test_create_device_duplicate_name(device_service):
    await device_service.create_device({"name": "gateway-03"})

    with pytest.raises(ConflictError):
        await device_service.create_device({"name": "gateway-03"})


async def test_get_device_by_unknown_id(device_service):
    with pytest.raises(NotFoundError):
        await device_service.get_device_by_id(uuid.uuid4())


async def test_get_device_by_malformed_id(device_service):
    with pytest.raises(NotFoundError):
        await device_service.get_device_by_id("123")


async def test_update_unknown_device_reports_not_found_before_validation(device_service):
    with pytest.raises(NotFoundError):
        await device_service.update_device(uuid.uuid4(), {"name": ""})


async def test_update_device_applies_present_fields(device_service):
    created = await device_service.create_device(
        {"name": "gateway-04", "location": "Roof"}
    )

    updated = await device_service.update_device(
        created.id, {"name": "gateway-04b", "status": None}
    )

    assert updated.name == "gateway-04b"
    assert updated.location == "Roof"
    assert updated.status == "active"


async def test_update_device_keeping_own_name(device_service):
    created = await device_service.create_device({"name": "gateway-05"})

    updated = await device_service.update_device(
        created.id, {"name": "gateway-05", "location": "Yard"}
    )

    assert updated.location == "Yard"


async def test_delete_device(device_service):
    created = await device_service.create_device({"name": "gateway-06"})

    await device_service.delete_device(created.id)

    with pytest.raises(NotFoundError):
        await device_service.get_device_by_id(created.id)


async def test_get_devices_pagination(device_service):
    for index in range(1, 6):
        await device_service.create_device({"name": f"device-{index}"})

    devices, pagination = await device_service.get_devices(
        {"page": 3, "limit": 2, "order_by": "name", "sort_by": "asc"}
    )

    assert [device.name for device in devices] == ["device-5"]
    assert pagination.total_data == 5
    assert pagination.total_page == 3


async def test_get_devices_page_past_end(device_service):
    await device_service.create_device({"name": "device-only"})

    devices, pagination = await device_service.get_devices({"page": 4, "limit": 10})

    assert devices == []
    assert pagination.total_data == 1
    assert pagination.total_page == 1


async def test_get_devices_rejects_sensor_column(device_service):
    with pytest.raises(ValidationFailedError):
        await device_service.get_devices(PaginationRequest(order_by="unit"))


async def test_deadline_exceeded_is_internal(session):
    service = DeviceService(
        device_repository=SlowDeviceRepository(session=session), timeout=0.05
    )

    with pytest.raises(InternalError):
        await service.create_device({"name": "too-slow"})


async def test_timestamps_are_rendered_in_utc(device_service):
    before = datetime.now(timezone.utc).replace(microsecond=0)

    created = await device_service.create_device({"name": "gateway-07"})
    updated = await device_service.update_device(created.id, {"status": "inactive"})

    after = datetime.now(timezone.utc) + timedelta(seconds=1)
    for rendered in (created.created_at, updated.updated_at):
        stamp = datetime.strptime(rendered, "%Y-%m-%d %H:%M:%S").replace(
            tzinfo=timezone.utc
        )
        assert before <= stamp <= after
    fetched = await device_service.get_device_by_id(created.id)
    assert fetched.created_at == created.created_at
