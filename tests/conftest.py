"""Pytest fixtures for dsperms tests."""

from __future__ import annotations

import pytest

from dsperms.application.dto.permission_payload import DatasourcePermissionAddPayload
from dsperms.application.use_cases.datasource_permission.apply_permissions import (
    ApplyDatasourcePermissionsUseCase,
)
from dsperms.application.use_cases.datasource_permission.delete_permissions import (
    DeleteDatasourcePermissionsUseCase,
)
from dsperms.application.use_cases.datasource_permission.read_permissions import (
    ReadDatasourcePermissionsUseCase,
)
from dsperms.domain.entities import RemotePermissionRecord
from dsperms.domain.exceptions import DatasourceNotFound


# --- Fake remote API ---


class FakeDatasourcePermissionAPI:
    """In-memory datasource permissions API with call log and failure injection."""

    def __init__(self, datasource_ids: tuple[int, ...] = (1,)) -> None:
        self._records: dict[int, list[RemotePermissionRecord]] = {
            ds: [] for ds in datasource_ids
        }
        self._next_id = 1
        self._failures: dict[tuple[str, int], Exception] = {}
        self.calls: list[tuple] = []

    def seed(
        self,
        datasource_id: int,
        permission: int = 1,
        team_id: int = 0,
        user_id: int = 0,
    ) -> RemotePermissionRecord:
        """Helper to put a record on the server without logging a call."""
        record = RemotePermissionRecord(
            id=self._next_id,
            datasource_id=datasource_id,
            permission=permission,
            team_id=team_id,
            user_id=user_id,
        )
        self._next_id += 1
        self._records.setdefault(datasource_id, []).append(record)
        return record

    def drop_datasource(self, datasource_id: int) -> None:
        self._records.pop(datasource_id, None)

    def fail_on(self, method: str, call_number: int, error: Exception) -> None:
        """Make the Nth call (1-based) of ``method`` raise ``error``."""
        self._failures[(method, call_number)] = error

    def records(self, datasource_id: int) -> list[RemotePermissionRecord]:
        return list(self._records.get(datasource_id, []))

    @property
    def mutation_calls(self) -> list[tuple]:
        return [c for c in self.calls if c[0] != "list"]

    def _record_call(self, method: str, *args: object) -> None:
        self.calls.append((method, *args))
        count = sum(1 for c in self.calls if c[0] == method)
        error = self._failures.get((method, count))
        if error is not None:
            raise error

    def _get(self, datasource_id: int) -> list[RemotePermissionRecord]:
        if datasource_id not in self._records:
            raise DatasourceNotFound('{"message":"Data source not found"}')
        return self._records[datasource_id]

    async def add_permission(
        self, datasource_id: int, payload: DatasourcePermissionAddPayload
    ) -> None:
        self._record_call("add", datasource_id, payload)
        self._get(datasource_id)
        self.seed(
            datasource_id,
            permission=payload.permission,
            team_id=payload.team_id,
            user_id=payload.user_id,
        )

    async def list_permissions(self, datasource_id: int) -> list[RemotePermissionRecord]:
        self._record_call("list", datasource_id)
        return list(self._get(datasource_id))

    async def remove_permission(self, datasource_id: int, permission_id: int) -> None:
        self._record_call("remove", datasource_id, permission_id)
        records = self._get(datasource_id)
        self._records[datasource_id] = [r for r in records if r.id != permission_id]


# --- Fixtures ---


@pytest.fixture
def fake_api() -> FakeDatasourcePermissionAPI:
    """Fresh in-memory API knowing datasources 1 and 2."""
    return FakeDatasourcePermissionAPI(datasource_ids=(1, 2))


@pytest.fixture
def read_use_case(fake_api) -> ReadDatasourcePermissionsUseCase:
    return ReadDatasourcePermissionsUseCase(fake_api)


@pytest.fixture
def apply_use_case(fake_api, read_use_case) -> ApplyDatasourcePermissionsUseCase:
    return ApplyDatasourcePermissionsUseCase(fake_api, read_use_case)


@pytest.fixture
def delete_use_case(fake_api) -> DeleteDatasourcePermissionsUseCase:
    return DeleteDatasourcePermissionsUseCase(fake_api)
