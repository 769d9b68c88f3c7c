"""Application ports - interfaces for external adapters."""

from dsperms.application.ports.datasource_permission_api import DatasourcePermissionAPI

__all__ = [
    "DatasourcePermissionAPI",
]
