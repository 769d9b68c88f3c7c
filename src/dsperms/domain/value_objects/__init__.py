"""Domain value objects."""

from dsperms.domain.value_objects.permission_level import (
    INVALID_PERMISSION_CODE,
    INVALID_PERMISSION_SYMBOL,
    PERMISSION_SYMBOLS,
    DatasourcePermission,
    decode,
    encode,
    encode_strict,
)
from dsperms.domain.value_objects.subject_kind import UNSET_SUBJECT_IDS, SubjectKind

__all__ = [
    "INVALID_PERMISSION_CODE",
    "INVALID_PERMISSION_SYMBOL",
    "PERMISSION_SYMBOLS",
    "UNSET_SUBJECT_IDS",
    "DatasourcePermission",
    "SubjectKind",
    "decode",
    "encode",
    "encode_strict",
]
