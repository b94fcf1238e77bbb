from app.domains.common.utils.formatting import format_timestamp
from app.domains.device.models.device_model import Device
from app.domains.device.models.dto import DeviceResponse
from app.domains.sensor.models.converter import sensor_to_response


def device_to_response(device: Device, include_sensors: bool = False) -> DeviceResponse:
    """將設備實體轉為響應；include_sensors 需要 device.sensors 已預先載入"""
    sensors = None
    if include_sensors:
        # 巢狀感測器不重複帶出設備名稱
        sensors = [
            sensor_to_response(sensor, include_device=False) for sensor in device.sensors
        ]

    return DeviceResponse(
        id=str(device.id),
        name=device.name,
        location=device.location,
        status=device.status,
        sensors=sensors,
        created_at=format_timestamp(device.created_at),
        updated_at=format_timestamp(device.updated_at),
    )
