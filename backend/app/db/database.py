"""
資料庫連接管理器
提供資料庫連接的生命週期管理
"""

import logging
from sqlalchemy.ext.asyncio import AsyncEngine
from sqlmodel import SQLModel

from app.db.base import engine

# 匯入所有資料表模型，讓 SQLModel.metadata 知道它們
from app.domains.device.models.device_model import Device  # noqa: F401
from app.domains.sensor.models.sensor_model import Sensor  # noqa: F401

logger = logging.getLogger(__name__)


class DatabaseManager:
    """資料庫連接管理器"""

    def __init__(self, engine: AsyncEngine):
        self.engine = engine
        self.is_connected = False

    async def connect(self):
        """建立資料庫連接並創建表格"""
        try:
            logger.info("Connecting to database and creating tables...")

            async with self.engine.begin() as conn:
                await conn.run_sync(SQLModel.metadata.create_all)

            self.is_connected = True
            logger.info("Database connected, tables created (if they didn't exist).")

        except Exception as e:
            logger.error(f"Database connection failed: {e}", exc_info=True)
            raise

    async def disconnect(self):
        """關閉資料庫連接"""
        if not self.is_connected:
            return
        await self.engine.dispose()
        self.is_connected = False
        logger.info("Database connection pool disposed.")

    def is_ready(self) -> bool:
        """檢查資料庫是否就緒"""
        return self.is_connected


# 創建全域資料庫管理器實例
database = DatabaseManager(engine)
