"""Domain entities."""

from dsperms.domain.entities.datasource_permissions import DatasourcePermissions
from dsperms.domain.entities.permission_grant import PermissionGrant
from dsperms.domain.entities.remote_permission import RemotePermissionRecord

__all__ = [
    "DatasourcePermissions",
    "PermissionGrant",
    "RemotePermissionRecord",
]
