from datetime import datetime, timezone
from typing import Optional

# 響應中時間戳的固定格式，一律以 UTC 呈現
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def format_timestamp(value: Optional[datetime]) -> str:
    if value is None:
        return ""
    # SQLite 讀回的值不含時區，存入時即為 UTC
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return value.strftime(TIMESTAMP_FORMAT)
