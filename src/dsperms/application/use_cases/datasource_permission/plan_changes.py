"""Permission change planning - diff declared grants against server records."""

from collections.abc import Iterable
from dataclasses import dataclass, field

from dsperms.domain.entities import PermissionGrant, RemotePermissionRecord


@dataclass
class PermissionChangePlan:
    """Remote mutations needed to converge a datasource, in issue order."""

    to_remove: list[RemotePermissionRecord] = field(default_factory=list)
    to_add: list[PermissionGrant] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.to_remove and not self.to_add


def sorted_grants(grants: Iterable[PermissionGrant]) -> list[PermissionGrant]:
    """Grants in a stable order so repeated runs issue identical call sequences."""
    return sorted(grants, key=lambda g: (g.permission, g.team_id, g.user_id))


def plan_changes(
    desired: frozenset[PermissionGrant],
    remote: list[RemotePermissionRecord],
) -> PermissionChangePlan:
    """Symmetric difference between desired grants and remote records.

    Records whose grant is not desired are removed in server order; desired
    grants missing on the server are added. Grants present on both sides
    produce no calls.
    """
    remote_grants = {record.to_grant() for record in remote}
    return PermissionChangePlan(
        to_remove=[record for record in remote if record.to_grant() not in desired],
        to_add=sorted_grants(desired - remote_grants),
    )
