"""
Pytest Configuration and Fixtures
"""
import os

# Keep test runs from writing rotating log files
os.environ.setdefault('LOG_DIR', '')

from unittest.mock import Mock

import pytest

from stk_gateway import create_app
from stk_gateway.config import MPesaSettings
from stk_gateway.services.stk_service import StkService


@pytest.fixture(scope='function')
def app():
    """Create application for testing"""
    app = create_app('testing')

    # Establish application context
    ctx = app.app_context()
    ctx.push()

    yield app

    ctx.pop()


@pytest.fixture(scope='function')
def client(app):
    """Create a test client"""
    return app.test_client()


@pytest.fixture
def settings():
    return MPesaSettings(
        consumer_key='test_consumer_key',
        consumer_secret='test_consumer_secret',
        shortcode='174379',
        passkey='test_passkey',
        callback_url='https://example.com/api/callback',
        base_url='https://sandbox.safaricom.co.ke',
        timeout=5,
    )


@pytest.fixture
def token_provider():
    """Token provider that never touches the network"""
    return Mock(return_value='daraja_tok_abc')


@pytest.fixture
def transport():
    """Daraja transport; set return_value / side_effect per test"""
    return Mock()


@pytest.fixture
def stk_service(settings, token_provider, transport):
    return StkService(settings, token_provider=token_provider, transport=transport)


@pytest.fixture
def mock_stk_service(app, stk_service):
    """Install the mocked StkService into the app under test"""
    app.extensions['mpesa']['stk_service'] = stk_service
    return stk_service


@pytest.fixture
def stk_callback_payload():
    """Successful STK push callback as Safaricom sends it"""
    return {
        'Body': {
            'stkCallback': {
                'MerchantRequestID': '29115-34620561-1',
                'CheckoutRequestID': 'ws_CO_191220191020363925',
                'ResultCode': 0,
                'ResultDesc': 'The service request is processed successfully.',
                'CallbackMetadata': {
                    'Item': [
                        {'Name': 'Amount', 'Value': 100},
                        {'Name': 'MpesaReceiptNumber', 'Value': 'ABC123'},
                        {'Name': 'TransactionDate', 'Value': 20191219102115},
                        {'Name': 'PhoneNumber', 'Value': 254712345678}
                    ]
                }
            }
        }
    }
