from config.settings import (
    LogSettings,
    PathSettings,
    Settings,
    SimulationSettings,
    get_settings,
    reset_settings,
)

__all__ = [
    "Settings",
    "SimulationSettings",
    "PathSettings",
    "LogSettings",
    "get_settings",
    "reset_settings",
]
