"""Apply datasource permissions use case - create and update."""

import logging

from dsperms.application.dto.permission_payload import DatasourcePermissionAddPayload
from dsperms.application.ports import DatasourcePermissionAPI
from dsperms.application.use_cases.datasource_permission.plan_changes import (
    PermissionChangePlan,
    plan_changes,
    sorted_grants,
)
from dsperms.application.use_cases.datasource_permission.read_permissions import (
    ReadDatasourcePermissionsUseCase,
)
from dsperms.domain.entities import DatasourcePermissions
from dsperms.domain.value_objects import encode_strict

logger = logging.getLogger(__name__)


class ApplyDatasourcePermissionsUseCase:
    """Converge a datasource's permissions to the declared grants.

    With ``prune_undeclared`` (the default) the server state is read first
    and only the difference is applied: stale records are removed, then
    missing grants are added. Without it every declared grant is added and
    nothing is removed.
    """

    def __init__(
        self,
        api: DatasourcePermissionAPI,
        read_permissions: ReadDatasourcePermissionsUseCase,
        prune_undeclared: bool = True,
    ) -> None:
        self._api = api
        self._read = read_permissions
        self._prune = prune_undeclared

    async def execute(self, state: DatasourcePermissions) -> None:
        """Apply ``state.permissions`` and refresh ``state`` from the server.

        Raises InvalidPermissionSymbol before any remote call when a grant
        names an unknown permission. Remote errors abort the remaining calls
        and propagate unchanged; calls already issued are not undone.
        """
        desired = state.permissions
        if not desired:
            return

        for grant in desired:
            encode_strict(grant.permission)

        datasource_id = state.datasource_id
        if self._prune:
            remote = await self._api.list_permissions(datasource_id)
            plan = plan_changes(desired, remote)
        else:
            plan = PermissionChangePlan(to_add=sorted_grants(desired))
        logger.debug(
            "datasource %d: %d permission(s) to remove, %d to add",
            datasource_id,
            len(plan.to_remove),
            len(plan.to_add),
        )

        for record in plan.to_remove:
            logger.info(
                "removing permission %d (code %d) from datasource %d",
                record.id,
                record.permission,
                datasource_id,
            )
            await self._api.remove_permission(datasource_id, record.id)

        for grant in plan.to_add:
            payload = DatasourcePermissionAddPayload.from_grant(grant)
            logger.info(
                "adding %s permission for %s %d on datasource %d",
                grant.permission,
                grant.subject_kind,
                grant.subject_id,
                datasource_id,
            )
            await self._api.add_permission(datasource_id, payload)

        state.track()
        await self._read.execute(state)
