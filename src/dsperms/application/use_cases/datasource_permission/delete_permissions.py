"""Delete datasource permissions use case."""

import logging

from dsperms.application.ports import DatasourcePermissionAPI
from dsperms.application.use_cases.datasource_permission.drift import (
    forget_missing_datasource,
)
from dsperms.domain.entities import DatasourcePermissions
from dsperms.domain.exceptions import RemoteAPIError, is_not_found

logger = logging.getLogger(__name__)


class DeleteDatasourcePermissionsUseCase:
    """Remove every permission currently attached to a datasource."""

    def __init__(self, api: DatasourcePermissionAPI) -> None:
        self._api = api

    async def execute(self, state: DatasourcePermissions) -> None:
        """Remove listed permissions one by one, in server order.

        The first failing removal aborts the rest; removals already issued
        stay removed.
        """
        datasource_id = state.datasource_id
        try:
            records = await self._api.list_permissions(datasource_id)
        except RemoteAPIError as e:
            if not is_not_found(e):
                raise
            forget_missing_datasource(state)
            return

        for record in records:
            logger.info(
                "removing permission %d (code %d) from datasource %d",
                record.id,
                record.permission,
                datasource_id,
            )
            await self._api.remove_permission(datasource_id, record.id)
