"""
共享領域模組

包含所有領域共用的模型、接口和工具。
"""

# 從基本模型導出
from app.domains.common.models.base_model import (
    DomainBaseModel,
    AuditableEntity,
)

# 從分頁模型導出
from app.domains.common.models.pagination import (
    PaginationRequest,
    PaginationResponse,
)

# 從儲存庫接口導出
from app.domains.common.interfaces.repository_interface import (
    RecordNotFoundError,
    RepositoryInterface,
)

# 從錯誤工具導出
from app.domains.common.utils.errors import (
    ConflictError,
    DomainError,
    ErrorKind,
    InternalError,
    NotFoundError,
    ValidationFailedError,
)
