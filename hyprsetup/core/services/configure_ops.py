"""
Configure action.

The config file is currently installed as the last step of the install
action, so this action has nothing left to do. It stays a separate menu
entry with its own outcome so standalone configuration steps have a
place to go.
"""

from __future__ import annotations

import logging

from hyprsetup.core.models.session import OutcomeEvent
from hyprsetup.core.models.settings import SetupConfig

logger = logging.getLogger(__name__)

CONFIGURE_OK = "Configuration completed."


def configure(settings: SetupConfig) -> OutcomeEvent:
    logger.debug("Configure: %s is installed by the install action", settings.config_file.source)
    return OutcomeEvent(status=CONFIGURE_OK)
