"""Lifecycle resource for datasource permissions.

Exposes the create/read/update/delete verbs a declarative lifecycle manager
drives. Each verb takes the tracked state, mutates it in place and either
returns normally or raises the remote error unchanged.
"""

from dsperms.application.dto.permission_config import DatasourcePermissionsConfig
from dsperms.application.use_cases.datasource_permission.apply_permissions import (
    ApplyDatasourcePermissionsUseCase,
)
from dsperms.application.use_cases.datasource_permission.delete_permissions import (
    DeleteDatasourcePermissionsUseCase,
)
from dsperms.application.use_cases.datasource_permission.read_permissions import (
    ReadDatasourcePermissionsUseCase,
)
from dsperms.domain.entities import DatasourcePermissions


class DatasourcePermissionsResource:
    """Create/Read/Update/Delete over a datasource's permission set."""

    schema = DatasourcePermissionsConfig

    def __init__(
        self,
        apply_permissions: ApplyDatasourcePermissionsUseCase,
        read_permissions: ReadDatasourcePermissionsUseCase,
        delete_permissions: DeleteDatasourcePermissionsUseCase,
    ) -> None:
        self._apply = apply_permissions
        self._read = read_permissions
        self._delete = delete_permissions

    async def create(self, state: DatasourcePermissions) -> None:
        await self._apply.execute(state)

    async def read(self, state: DatasourcePermissions) -> None:
        await self._read.execute(state)

    async def update(self, state: DatasourcePermissions) -> None:
        await self._apply.execute(state)

    async def delete(self, state: DatasourcePermissions) -> None:
        await self._delete.execute(state)

    async def create_from_config(self, config: DatasourcePermissionsConfig) -> DatasourcePermissions:
        """Build state from a parsed declaration and create it."""
        state = config.to_state()
        await self.create(state)
        return state
