"""Payload DTO for the add-permission call."""

from dataclasses import dataclass

from dsperms.domain.entities import PermissionGrant
from dsperms.domain.value_objects import encode


@dataclass(frozen=True)
class DatasourcePermissionAddPayload:
    """One grant in wire form. Both subject ids may be set."""

    permission: int
    team_id: int = 0
    user_id: int = 0

    @classmethod
    def from_grant(cls, grant: PermissionGrant) -> "DatasourcePermissionAddPayload":
        return cls(
            permission=encode(grant.permission),
            team_id=grant.team_id,
            user_id=grant.user_id,
        )
