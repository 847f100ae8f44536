"""
Utils Package
Utility functions and helpers
"""

from stk_gateway.utils.credentials import ProviderCredential, generate_password
from stk_gateway.utils.logger import get_logger, configure_app_logging, RequestLogger
from stk_gateway.utils.validators import normalize_phone_number

__all__ = [
    'ProviderCredential',
    'generate_password',
    'get_logger',
    'configure_app_logging',
    'RequestLogger',
    'normalize_phone_number',
]
