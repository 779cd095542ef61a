"""Webhook entry points invoked by the UI command layer."""

from __future__ import annotations

import logging

from core.exceptions import ConfigurationError, ValidationError
from core.result import Err
from features.settings import SettingsProvider

from .client import ExternalServiceClient
from .errors import ServiceError
from .schemas import ExternalServiceResponse

logger = logging.getLogger(__name__)


async def call_external_service(
    url: str,
    text: str,
    *,
    client: ExternalServiceClient | None = None,
) -> ExternalServiceResponse:
    """Relay ``text`` to ``url``."""

    client = client or ExternalServiceClient()
    result = await client.relay(url, text)
    return ExternalServiceResponse.from_result(result)


async def run_custom_action(
    action_id: str,
    text: str,
    settings_provider: SettingsProvider,
    *,
    client: ExternalServiceClient | None = None,
) -> ExternalServiceResponse:
    """Relay ``text`` to the URL of the custom action ``action_id``."""

    try:
        settings = settings_provider.load()
    except (ConfigurationError, ValidationError) as exc:
        logger.error("Could not load settings for custom action %s: %s", action_id, exc)
        return ExternalServiceResponse.from_result(Err(ServiceError(str(exc))))

    action = settings.find_custom_action(action_id)
    if action is None:
        logger.warning("Custom action not found: %s", action_id)
        return ExternalServiceResponse.from_result(Err(ServiceError(f"Custom action not found: {action_id}")))

    logger.info("Running custom action %s (%s)", action.id, action.name)
    return await call_external_service(action.url, text, client=client)


__all__ = ["call_external_service", "run_custom_action"]
