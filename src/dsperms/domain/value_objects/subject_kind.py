"""Principal kinds a datasource permission can be granted to."""

from enum import StrEnum

# Subject ids that mean "not set". Declarations default to 0, older
# configurations used -1.
UNSET_SUBJECT_IDS = frozenset({0, -1})


class SubjectKind(StrEnum):
    """Who a grant applies to."""

    TEAM = "team"
    USER = "user"
