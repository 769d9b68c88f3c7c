"""Permission grant entity - one permission level assigned to a team or user."""

from dataclasses import dataclass

from dsperms.domain.value_objects import UNSET_SUBJECT_IDS, SubjectKind


@dataclass(frozen=True)
class PermissionGrant:
    """Permission granted to a subject on a datasource.

    Unset subject ids are stored as 0, so grants built from declarations and
    grants read back from the server compare equal.
    """

    permission: str
    team_id: int = 0
    user_id: int = 0

    def __post_init__(self) -> None:
        if self.team_id in UNSET_SUBJECT_IDS:
            object.__setattr__(self, "team_id", 0)
        if self.user_id in UNSET_SUBJECT_IDS:
            object.__setattr__(self, "user_id", 0)

    @property
    def subject_kind(self) -> SubjectKind | None:
        """Team wins when both ids are set; the API accepts either."""
        if self.team_id:
            return SubjectKind.TEAM
        if self.user_id:
            return SubjectKind.USER
        return None

    @property
    def subject_id(self) -> int:
        return self.team_id or self.user_id
