"""Drift handling when the tracked datasource has disappeared."""

import logging

from dsperms.domain.entities import DatasourcePermissions

logger = logging.getLogger(__name__)


def forget_missing_datasource(state: DatasourcePermissions) -> None:
    """Clear the tracking identifier of a datasource the server no longer knows."""
    logger.warning(
        "removing datasource permissions %d from state because it no longer exists",
        state.datasource_id,
    )
    state.forget()
