"""
Domain models for the setup assistant.

All models are re-exported here for convenient access:

    from hyprsetup.core.models import SessionState, OutcomeEvent, SetupConfig
"""

from hyprsetup.core.models.action import Action, Receipt
from hyprsetup.core.models.session import (
    MENU_LABELS,
    KeyEvent,
    MenuEntry,
    OutcomeEvent,
    Phase,
    SessionEvent,
    SessionState,
    TickEvent,
)
from hyprsetup.core.models.settings import (
    ConfigFileSpec,
    PackageManagerConfig,
    RuntimeDirConfig,
    SetupConfig,
)

__all__ = [
    # action.py
    "Action",
    "Receipt",
    # session.py
    "KeyEvent",
    "MENU_LABELS",
    "MenuEntry",
    "OutcomeEvent",
    "Phase",
    "SessionEvent",
    "SessionState",
    "TickEvent",
    # settings.py
    "ConfigFileSpec",
    "PackageManagerConfig",
    "RuntimeDirConfig",
    "SetupConfig",
]
