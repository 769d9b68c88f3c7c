"""Declarative configuration models for datasource permissions."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from dsperms.domain.entities import DatasourcePermissions, PermissionGrant
from dsperms.domain.value_objects import PERMISSION_SYMBOLS


class PermissionItemConfig(BaseModel):
    """One declared permission item."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    team_id: int = Field(default=0, description="ID of the team to manage permissions for.")
    user_id: int = Field(default=0, description="ID of the user to manage permissions for.")
    permission: str = Field(
        description="Permission to associate with item. Must be `Query`.",
    )

    @field_validator("permission")
    @classmethod
    def _check_permission(cls, value: str) -> str:
        if value not in PERMISSION_SYMBOLS:
            raise ValueError(
                f"expected permission to be one of {list(PERMISSION_SYMBOLS)}, got {value!r}"
            )
        return value

    def to_grant(self) -> PermissionGrant:
        return PermissionGrant(
            permission=self.permission,
            team_id=self.team_id,
            user_id=self.user_id,
        )


class DatasourcePermissionsConfig(BaseModel):
    """Declared permissions of a datasource.

    Items that are omitted from the list are removed from the datasource.
    Leaving ``permissions`` out (or empty) means the permissions are not managed.
    """

    model_config = ConfigDict(extra="forbid")

    datasource_id: int = Field(description="ID of the datasource to apply permissions to.")
    permissions: list[PermissionItemConfig] | None = Field(
        default=None,
        description="The permission items to add/update.",
    )

    def to_grants(self) -> frozenset[PermissionGrant] | None:
        if self.permissions is None:
            return None
        return frozenset(item.to_grant() for item in self.permissions)

    def to_state(self, tracking_id: str = "") -> DatasourcePermissions:
        return DatasourcePermissions(
            datasource_id=self.datasource_id,
            permissions=self.to_grants(),
            id=tracking_id,
        )
