from app.domains.common.utils.formatting import format_timestamp
from app.domains.sensor.models.dto import SensorResponse
from app.domains.sensor.models.sensor_model import Sensor


def sensor_to_response(sensor: Sensor, include_device: bool = True) -> SensorResponse:
    """將感測器實體轉為響應

    include_device 為 True 時 sensor.device 必須已預先載入，
    其名稱會帶入 device_name 欄位。
    """
    device_name = None
    if include_device and sensor.device is not None:
        device_name = sensor.device.name

    return SensorResponse(
        id=str(sensor.id),
        device_id=str(sensor.device_id),
        device_name=device_name,
        name=sensor.name,
        type=sensor.type,
        unit=sensor.unit,
        is_active=sensor.is_active,
        created_at=format_timestamp(sensor.created_at),
        updated_at=format_timestamp(sensor.updated_at),
    )
