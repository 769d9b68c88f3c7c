"""Datasource permissions entity - the tracked resource and its declared grants."""

from dataclasses import dataclass
from typing import Any

from dsperms.domain.entities.permission_grant import PermissionGrant
from dsperms.domain.exceptions import ValidationError


@dataclass
class DatasourcePermissions:
    """Permission state of one datasource as seen by the lifecycle framework.

    ``id`` is the tracking identifier: the decimal datasource id while the
    permissions are managed, "" once the datasource is known to be gone.
    ``permissions`` is None when the declaration has no permissions block.
    """

    datasource_id: int
    permissions: frozenset[PermissionGrant] | None = None
    id: str = ""

    def __setattr__(self, name: str, value: Any) -> None:
        if (
            name == "datasource_id"
            and "datasource_id" in self.__dict__
            and value != self.datasource_id
        ):
            raise ValidationError("datasource_id cannot be changed, declare a new resource")
        super().__setattr__(name, value)

    @property
    def exists(self) -> bool:
        return self.id != ""

    def track(self) -> None:
        """Record the datasource as managed."""
        self.id = str(self.datasource_id)

    def forget(self) -> None:
        """Drop the tracking identifier."""
        self.id = ""
