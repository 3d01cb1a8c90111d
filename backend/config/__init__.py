"""
Configuration module for settings and backend connections.
"""
from .settings import Settings, get_settings
from .backend import (
    BackendConfig,
    is_backend_configured,
    create_dossier_backend,
)

__all__ = [
    'Settings',
    'get_settings',
    'BackendConfig',
    'is_backend_configured',
    'create_dossier_backend',
]
