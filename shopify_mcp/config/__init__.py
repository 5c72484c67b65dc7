from .config import (
    LOG_FORMAT,
    Settings,
    ShopifyClientConfig,
    configure_logging,
    get_settings,
)

__all__ = [
    'LOG_FORMAT',
    'Settings',
    'ShopifyClientConfig',
    'configure_logging',
    'get_settings',
]
