"""Application DTOs."""

from dsperms.application.dto.permission_config import (
    DatasourcePermissionsConfig,
    PermissionItemConfig,
)
from dsperms.application.dto.permission_payload import DatasourcePermissionAddPayload

__all__ = [
    "DatasourcePermissionAddPayload",
    "DatasourcePermissionsConfig",
    "PermissionItemConfig",
]
