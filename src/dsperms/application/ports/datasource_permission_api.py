"""Datasource permission API port - remote permission storage."""

from typing import Protocol

from dsperms.application.dto.permission_payload import DatasourcePermissionAddPayload
from dsperms.domain.entities import RemotePermissionRecord


class DatasourcePermissionAPI(Protocol):
    """Port for reading and mutating a datasource's permissions on the server.

    A missing datasource is reported by raising ``DatasourceNotFound``; any
    other error status by raising ``RemoteAPIError``.
    """

    async def add_permission(
        self, datasource_id: int, payload: DatasourcePermissionAddPayload
    ) -> None: ...

    async def list_permissions(self, datasource_id: int) -> list[RemotePermissionRecord]: ...

    async def remove_permission(self, datasource_id: int, permission_id: int) -> None: ...
