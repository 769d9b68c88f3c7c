"""Grafana HTTP API adapter for datasource permissions."""

import httpx

from dsperms.application.dto.permission_payload import DatasourcePermissionAddPayload
from dsperms.domain.entities import RemotePermissionRecord
from dsperms.domain.exceptions import DatasourceNotFound, RemoteAPIError


class GrafanaDatasourcePermissionClient:
    """Datasource permissions over ``/api/datasources/{id}/permissions``."""

    def __init__(
        self,
        base_url: str,
        auth: str = "",
        org_id: int | None = None,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        headers = {"Accept": "application/json"}
        basic_auth = None
        if ":" in auth:
            username, _, password = auth.partition(":")
            basic_auth = (username, password)
        elif auth:
            headers["Authorization"] = f"Bearer {auth}"
        if org_id is not None:
            headers["X-Grafana-Org-Id"] = str(org_id)

        self._client = httpx.AsyncClient(
            base_url=base_url.rstrip("/"),
            headers=headers,
            auth=basic_auth,
            timeout=timeout,
            transport=transport,
        )

    async def __aenter__(self) -> "GrafanaDatasourcePermissionClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def add_permission(
        self, datasource_id: int, payload: DatasourcePermissionAddPayload
    ) -> None:
        """POST one permission item."""
        body: dict[str, int] = {"permission": payload.permission}
        if payload.team_id:
            body["teamId"] = payload.team_id
        if payload.user_id:
            body["userId"] = payload.user_id
        response = await self._client.post(
            f"/api/datasources/{datasource_id}/permissions", json=body
        )
        _raise_for_status(response)

    async def list_permissions(self, datasource_id: int) -> list[RemotePermissionRecord]:
        """GET permissions in server order."""
        response = await self._client.get(f"/api/datasources/{datasource_id}/permissions")
        _raise_for_status(response)
        data = response.json()
        return [
            RemotePermissionRecord(
                id=item["id"],
                datasource_id=item.get("datasourceId", datasource_id),
                permission=item["permission"],
                team_id=item.get("teamId") or 0,
                user_id=item.get("userId") or 0,
            )
            for item in data.get("permissions") or []
        ]

    async def remove_permission(self, datasource_id: int, permission_id: int) -> None:
        """DELETE one permission record."""
        response = await self._client.delete(
            f"/api/datasources/{datasource_id}/permissions/{permission_id}"
        )
        _raise_for_status(response)


def _raise_for_status(response: httpx.Response) -> None:
    if response.status_code == 404:
        raise DatasourceNotFound(response.text)
    if response.status_code >= 400:
        raise RemoteAPIError(response.status_code, response.text)
