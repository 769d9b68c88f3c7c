"""Application entry point and composition root."""

from dsperms import __version__
from dsperms.application.ports import DatasourcePermissionAPI
from dsperms.application.use_cases.datasource_permission.apply_permissions import (
    ApplyDatasourcePermissionsUseCase,
)
from dsperms.application.use_cases.datasource_permission.delete_permissions import (
    DeleteDatasourcePermissionsUseCase,
)
from dsperms.application.use_cases.datasource_permission.read_permissions import (
    ReadDatasourcePermissionsUseCase,
)
from dsperms.config import Settings, get_settings
from dsperms.infrastructure.grafana.datasource_permission_client import (
    GrafanaDatasourcePermissionClient,
)
from dsperms.interfaces.lifecycle.datasource_permissions import DatasourcePermissionsResource
from dsperms.logging_config import configure_logging


def main() -> None:
    """CLI entry point."""
    settings = get_settings()
    configure_logging(settings.log_level, settings.log_format)
    print(f"dsperms v{__version__}")


def create_grafana_client(settings: Settings | None = None) -> GrafanaDatasourcePermissionClient:
    """Grafana adapter configured from settings. Caller closes it."""
    settings = settings or get_settings()
    return GrafanaDatasourcePermissionClient(
        base_url=settings.grafana_url,
        auth=settings.grafana_auth,
        org_id=settings.grafana_org_id,
        timeout=settings.request_timeout,
    )


def create_datasource_permissions_resource(
    api: DatasourcePermissionAPI,
    settings: Settings | None = None,
) -> DatasourcePermissionsResource:
    """Composition root - wire use cases around a permission API."""
    settings = settings or get_settings()
    read_permissions = ReadDatasourcePermissionsUseCase(api)
    apply_permissions = ApplyDatasourcePermissionsUseCase(
        api,
        read_permissions,
        prune_undeclared=settings.prune_undeclared,
    )
    delete_permissions = DeleteDatasourcePermissionsUseCase(api)
    return DatasourcePermissionsResource(
        apply_permissions=apply_permissions,
        read_permissions=read_permissions,
        delete_permissions=delete_permissions,
    )
