"""Read datasource permissions use case."""

from dsperms.application.ports import DatasourcePermissionAPI
from dsperms.application.use_cases.datasource_permission.drift import (
    forget_missing_datasource,
)
from dsperms.domain.entities import DatasourcePermissions
from dsperms.domain.exceptions import RemoteAPIError, is_not_found


class ReadDatasourcePermissionsUseCase:
    """Refresh declared permissions from the server."""

    def __init__(self, api: DatasourcePermissionAPI) -> None:
        self._api = api

    async def execute(self, state: DatasourcePermissions) -> None:
        """Replace ``state.permissions`` with the server's grants.

        A missing datasource is not an error: the tracking identifier is
        cleared and the call returns normally.
        """
        try:
            records = await self._api.list_permissions(state.datasource_id)
        except RemoteAPIError as e:
            if not is_not_found(e):
                raise
            forget_missing_datasource(state)
            return

        state.permissions = frozenset(record.to_grant() for record in records)
