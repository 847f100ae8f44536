"""
STK Push API Endpoints
Payment requests, provider callbacks and status queries
"""

from flask import Blueprint, jsonify, request
from marshmallow import ValidationError

from stk_gateway.errors import AppError, InternalError, MissingField
from stk_gateway.extensions import mpesa
from stk_gateway.schemas import (
    CallbackTransactionSchema,
    StatusQueryRequestSchema,
    StkPushRequestSchema,
    StkPushResponseSchema,
)
from stk_gateway.utils.logger import get_logger

stk_bp = Blueprint('stk', __name__)
logger = get_logger(__name__)

stk_request_schema = StkPushRequestSchema()
stk_response_schema = StkPushResponseSchema()
query_request_schema = StatusQueryRequestSchema()
transaction_schema = CallbackTransactionSchema()


def _error_response(error: AppError):
    return jsonify(error.to_dict()), error.status_code


@stk_bp.route('/test-token', methods=['GET'])
def test_token():
    """
    Fetch a Daraja access token to check the consumer credentials
    """
    try:
        token = mpesa.stk_service.token_provider()
        return jsonify({
            'message': 'Token generated successfully',
            'token': token
        }), 200

    except AppError as e:
        return _error_response(e)

    except Exception as e:
        logger.error(f'Token generation failed: {str(e)}')
        return _error_response(InternalError(str(e)))


@stk_bp.route('/stk', methods=['POST'])
def stk_push():
    """
    Send an STK push prompt to the payer's phone

    Body:
        {
            "phoneNumber": "0712345678",
            "amount": 100
        }
    """
    try:
        try:
            data = stk_request_schema.load(request.get_json(silent=True) or {})
        except ValidationError as e:
            raise MissingField("Phone number and amount are required fields.") from e

        result = mpesa.stk_service.initiate_payment(data['phoneNumber'], data['amount'])

        return jsonify(stk_response_schema.dump(result)), 200

    except AppError as e:
        if e.status_code >= 500:
            logger.error(f'Error during STK Push: {e.message}')
        return _error_response(e)

    except Exception as e:
        logger.error(f'Error during STK Push: {str(e)}')
        return _error_response(InternalError(str(e)))


@stk_bp.route('/callback', methods=['POST'])
def stk_callback():
    """
    Receive the STK push result from Safaricom

    Body:
        {
            "Body": {
                "stkCallback": {
                    "MerchantRequestID": "...",
                    "CheckoutRequestID": "...",
                    "ResultCode": 0,
                    "ResultDesc": "The service request is processed successfully.",
                    "CallbackMetadata": {"Item": [{"Name": "Amount", "Value": 100}, ...]}
                }
            }
        }
    """
    try:
        result = mpesa.callback_service.handle_callback(request.get_json(silent=True))

        if not result.succeeded:
            return jsonify({
                'ResultCode': result.result_code,
                'ResultDesc': result.result_desc
            }), 400

        return jsonify({
            'message': 'Callback processed successfully.',
            'transaction': transaction_schema.dump(result.transaction)
        }), 200

    except AppError as e:
        return _error_response(e)

    except Exception as e:
        logger.error(f'Callback processing error: {str(e)}')
        return jsonify({
            'error': 'An error occurred while processing the callback.',
            'details': str(e)
        }), 500


@stk_bp.route('/stkquery', methods=['POST'])
def stk_query():
    """
    Query the status of an STK push

    Body:
        {
            "checkoutRequestID": "ws_CO_..."
        }
    """
    try:
        try:
            data = query_request_schema.load(request.get_json(silent=True) or {})
        except ValidationError as e:
            raise MissingField("CheckoutRequestID is required") from e

        result = mpesa.stk_service.query_status(data['checkoutRequestID'])

        if result.succeeded:
            return jsonify({
                'status': 'Success',
                'message': 'Payment successful',
                'data': result.data
            }), 200

        return jsonify({
            'status': 'Failure',
            'message': result.result_desc,
            'data': result.data
        }), 400

    except AppError as e:
        if e.status_code >= 500:
            logger.error(f'STK Query Error: {e.message}')
        return _error_response(e)

    except Exception as e:
        logger.error(f'STK Query Error: {str(e)}')
        return _error_response(InternalError(str(e)))
