"""
Domain Layer

包含應用程序的核心領域模型和業務邏輯，按功能領域分為多個子模塊：

- common: 通用儲存庫、分頁、錯誤與響應工具
- device: IoT 設備的建立、查詢、更新與刪除
- sensor: 隸屬於設備的感測器管理
"""

# 註冊所有資料表模型，確保關聯在映射設定前皆可解析
from app.domains.device.models.device_model import Device  # noqa: F401
from app.domains.sensor.models.sensor_model import Sensor  # noqa: F401
