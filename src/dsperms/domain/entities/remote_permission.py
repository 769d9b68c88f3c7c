"""Remote permission record - server view of one datasource permission."""

from dataclasses import dataclass

from dsperms.domain.entities.permission_grant import PermissionGrant
from dsperms.domain.value_objects import decode


@dataclass(frozen=True)
class RemotePermissionRecord:
    """Permission as listed by the server.

    ``id`` is the server-side record identifier used by removal calls.
    ``permission`` is the wire code.
    """

    id: int
    datasource_id: int
    permission: int
    team_id: int = 0
    user_id: int = 0

    def to_grant(self) -> PermissionGrant:
        return PermissionGrant(
            permission=decode(self.permission),
            team_id=self.team_id,
            user_id=self.user_id,
        )
