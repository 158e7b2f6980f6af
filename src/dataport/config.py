from __future__ import annotations

import logging
from dataclasses import dataclass

from starlette.config import Config

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PortSettings:
    strict_conditions: bool = False
    log_route_overwrites: bool = True


def load_port_settings(config: Config) -> PortSettings:
    """
    Read port behaviour flags from the environment (or the config's .env file).
    """
    strict = config("DATAPORT_STRICT_CONDITIONS", cast=bool, default=False)
    log_overwrites = config("DATAPORT_LOG_ROUTE_OVERWRITES", cast=bool, default=True)

    logger.debug(
        "Port settings loaded: strict_conditions=%s log_route_overwrites=%s",
        strict,
        log_overwrites,
    )
    return PortSettings(
        strict_conditions=strict,
        log_route_overwrites=log_overwrites,
    )
