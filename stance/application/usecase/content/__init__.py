"""Content use cases."""

from .admin_content import (
    AdminContentListResponse,
    AdminContentView,
    GetAdminContentRequest,
    GetAdminContentUseCase,
    ListAdminContentsUseCase,
    SaveContentRequest,
    SaveContentUseCase,
)
from .delete_content import (
    DeleteContentRequest,
    DeleteContentResponse,
    DeleteContentUseCase,
)
from .get_content import GetContentRequest, GetContentResponse, GetContentUseCase
from .list_contents import (
    ContentSummary,
    ListContentsRequest,
    ListContentsResponse,
    ListContentsUseCase,
)

__all__ = [
    "AdminContentListResponse",
    "AdminContentView",
    "ContentSummary",
    "DeleteContentRequest",
    "DeleteContentResponse",
    "DeleteContentUseCase",
    "GetAdminContentRequest",
    "GetAdminContentUseCase",
    "GetContentRequest",
    "GetContentResponse",
    "GetContentUseCase",
    "ListAdminContentsUseCase",
    "ListContentsRequest",
    "ListContentsResponse",
    "ListContentsUseCase",
    "SaveContentRequest",
    "SaveContentUseCase",
]
