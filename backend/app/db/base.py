from sqlalchemy import event
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from app.core.config import DATABASE_URL, DB_ECHO


def enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    """SQLite 預設不檢查外鍵，感測器的級聯刪除依賴它"""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


# SQLite 需要額外的連線參數；記憶體資料庫必須共用同一條連線
engine_kwargs = {}
if DATABASE_URL.startswith("sqlite"):
    engine_kwargs["connect_args"] = {"check_same_thread": False}
    if ":memory:" in DATABASE_URL or DATABASE_URL.endswith("://"):
        engine_kwargs["poolclass"] = StaticPool

# 使用 async engine
# echo=False 可避免印出 SQL 指令，設為 True 可用於除錯
engine = create_async_engine(DATABASE_URL, echo=DB_ECHO, future=True, **engine_kwargs)

if engine.dialect.name == "sqlite":
    event.listen(engine.sync_engine, "connect", enable_sqlite_foreign_keys)

# Async session maker
# expire_on_commit=False 可讓你在 commit 後仍能存取 session 中的物件
async_session_maker = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
