"""Datasource permission levels and their wire codes.

The remote API speaks integer codes, declarations use symbolic names.
``DatasourcePermission`` is the only place the two are related: the
declarative allow-list is derived from it, so adding a member here is all
it takes to support a new level.
"""

from enum import IntEnum

from dsperms.domain.exceptions import InvalidPermissionSymbol

INVALID_PERMISSION_CODE = -1
INVALID_PERMISSION_SYMBOL = "-1"


class DatasourcePermission(IntEnum):
    """Permission levels accepted by the datasource permissions API."""

    QUERY = 1

    @property
    def symbol(self) -> str:
        return self.name.title()


PERMISSION_SYMBOLS: tuple[str, ...] = tuple(p.symbol for p in DatasourcePermission)

_BY_SYMBOL = {p.symbol: p for p in DatasourcePermission}


def encode(symbol: str) -> int:
    """Wire code for a permission name, -1 when the name is unknown."""
    permission = _BY_SYMBOL.get(symbol)
    if permission is None:
        return INVALID_PERMISSION_CODE
    return int(permission)


def decode(code: int) -> str:
    """Permission name for a wire code, "-1" when the code is unknown."""
    try:
        return DatasourcePermission(code).symbol
    except ValueError:
        return INVALID_PERMISSION_SYMBOL


def encode_strict(symbol: str) -> int:
    """Like ``encode`` but raises ``InvalidPermissionSymbol`` instead of returning -1."""
    code = encode(symbol)
    if code == INVALID_PERMISSION_CODE:
        raise InvalidPermissionSymbol(symbol)
    return code
