import os
import re
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from dotenv import load_dotenv

load_dotenv()


# Daraja base URLs
BASE_URLS = {
    "sandbox":    "https://sandbox.safaricom.co.ke",
    "production": "https://api.safaricom.co.ke",
}

# Origins allowed to call the gateway from a browser
DEFAULT_CORS_ORIGINS = [
    "http://kilonzocorp.com",
    "https://kilonzocorp.com",
    "http://localhost:3000",
    "https://localhost:3000",
    "http://localhost:5000",
    "https://localhost:5000",
    re.compile(r".*\.vercel\.app$"),
    "https://kilonzocorp.vercel.app",
    "http://kilonzocorp.vercel.app",
]


def _origins_from_env(value: Optional[str]):
    if not value:
        return DEFAULT_CORS_ORIGINS
    return [origin.strip() for origin in value.split(',') if origin.strip()]


class Config:
    """Base configuration"""
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key')
    PORT = int(os.getenv('PORT', 5000))
    API_PREFIX = os.getenv('API_PREFIX', '/api')
    LOG_DIR = os.getenv('LOG_DIR', 'logs')

    CORS_ORIGINS = _origins_from_env(os.getenv('CORS_ORIGINS'))

    # M-Pesa (Daraja) Configuration
    MPESA_CONSUMER_KEY = os.getenv('MPESA_CONSUMER_KEY')
    MPESA_CONSUMER_SECRET = os.getenv('MPESA_CONSUMER_SECRET')
    MPESA_SHORTCODE = os.getenv('MPESA_SHORTCODE')
    MPESA_PASSKEY = os.getenv('MPESA_PASSKEY')
    MPESA_CALLBACK_URL = os.getenv('MPESA_CALLBACK_URL', '')
    MPESA_ENV = os.getenv('MPESA_ENV', 'production')
    MPESA_BASE_URL = os.getenv('MPESA_BASE_URL')
    MPESA_TIMEOUT = float(os.getenv('MPESA_TIMEOUT', 30))
    MPESA_TIMEZONE = os.getenv('MPESA_TIMEZONE', 'Africa/Nairobi')
    MPESA_TRANSACTION_TYPE = os.getenv('MPESA_TRANSACTION_TYPE', 'CustomerPayBillOnline')
    MPESA_ACCOUNT_REFERENCE = os.getenv('MPESA_ACCOUNT_REFERENCE', 'PaymentRef')
    MPESA_TRANSACTION_DESC = os.getenv('MPESA_TRANSACTION_DESC', 'Payment for goods/services')


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True
    TESTING = False
    MPESA_ENV = os.getenv('MPESA_ENV', 'sandbox')


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False
    TESTING = False


class TestingConfig(Config):
    """Testing configuration"""
    TESTING = True
    LOG_DIR = None
    MPESA_CONSUMER_KEY = 'test_consumer_key'
    MPESA_CONSUMER_SECRET = 'test_consumer_secret'
    MPESA_SHORTCODE = '174379'
    MPESA_PASSKEY = 'test_passkey'
    MPESA_CALLBACK_URL = 'https://example.com/api/callback'
    MPESA_ENV = 'sandbox'
    MPESA_BASE_URL = None
    MPESA_TIMEOUT = 5


config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}


@dataclass(frozen=True)
class MPesaSettings:
    """Daraja credentials and request defaults, passed explicitly to the provider and services"""
    consumer_key: str
    consumer_secret: str
    shortcode: str
    passkey: str
    callback_url: str
    base_url: str
    timeout: float = 30
    timezone: str = 'Africa/Nairobi'
    transaction_type: str = 'CustomerPayBillOnline'
    account_reference: str = 'PaymentRef'
    transaction_desc: str = 'Payment for goods/services'

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> 'MPesaSettings':
        """
        Build settings from a Flask config (or any mapping of MPESA_* keys)

        Raises:
            ValueError: If MPESA_ENV is unknown and no MPESA_BASE_URL is given
        """
        environment = (mapping.get('MPESA_ENV') or 'sandbox').lower()
        base_url = mapping.get('MPESA_BASE_URL')
        if not base_url:
            if environment not in BASE_URLS:
                raise ValueError(
                    f"MPESA_ENV must be 'sandbox' or 'production', got '{environment}'"
                )
            base_url = BASE_URLS[environment]

        return cls(
            consumer_key=mapping.get('MPESA_CONSUMER_KEY') or '',
            consumer_secret=mapping.get('MPESA_CONSUMER_SECRET') or '',
            shortcode=str(mapping.get('MPESA_SHORTCODE') or ''),
            passkey=mapping.get('MPESA_PASSKEY') or '',
            callback_url=mapping.get('MPESA_CALLBACK_URL') or '',
            base_url=base_url.rstrip('/'),
            timeout=float(mapping.get('MPESA_TIMEOUT') or 30),
            timezone=mapping.get('MPESA_TIMEZONE') or 'Africa/Nairobi',
            transaction_type=mapping.get('MPESA_TRANSACTION_TYPE') or 'CustomerPayBillOnline',
            account_reference=mapping.get('MPESA_ACCOUNT_REFERENCE') or 'PaymentRef',
            transaction_desc=mapping.get('MPESA_TRANSACTION_DESC') or 'Payment for goods/services',
        )
