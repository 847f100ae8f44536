"""
STK Service
Initiates Lipa na M-Pesa Online payments and queries their status
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

from stk_gateway.config import MPesaSettings
from stk_gateway.errors import (
    AppError,
    InternalError,
    InvalidPhoneFormat,
    MissingField,
    RequestRejected,
)
from stk_gateway.providers.mpesa_provider import EP_STK_PUSH, EP_STK_QUERY
from stk_gateway.utils.credentials import generate_password
from stk_gateway.utils.logger import get_logger
from stk_gateway.utils.validators import normalize_phone_number

logger = get_logger(__name__)


# Daraja types ResponseCode / ResultCode as strings on these two endpoints
SUCCESS_CODE = "0"

TokenProvider = Callable[[], str]
Transport = Callable[[str, Dict[str, Any], str], Dict[str, Any]]


@dataclass
class StkPushResult:
    checkout_request_id: Optional[str]
    merchant_request_id: Optional[str]
    response_description: Optional[str]
    raw_response: Dict[str, Any] = field(default_factory=dict)


@dataclass
class StatusQueryResult:
    result_code: Any
    result_desc: Optional[str]
    data: Dict[str, Any] = field(default_factory=dict)

    @property
    def succeeded(self) -> bool:
        return self.result_code == SUCCESS_CODE


class StkService:
    """Service for STK push requests and status queries"""

    def __init__(self, settings: MPesaSettings, token_provider: TokenProvider, transport: Transport):
        """
        Args:
            settings: Daraja credentials and request defaults
            token_provider: Callable returning a bearer token
            transport: Callable(endpoint, payload, token) performing the provider request
        """
        self.settings = settings
        self.token_provider = token_provider
        self.transport = transport

    def initiate_payment(self, phone_number: Any, amount: Any, token: Optional[str] = None) -> StkPushResult:
        """
        Send an STK push prompt to the payer's phone

        Args:
            phone_number: Raw phone number in any accepted format
            amount: Amount to charge, passed to Daraja as given
            token: Bearer token; fetched from the token provider when omitted

        Returns:
            StkPushResult for an accepted request (ResponseCode "0")

        Raises:
            MissingField: phone number or amount absent
            InvalidPhoneFormat: phone number cannot be normalised
            RequestRejected: Daraja acknowledged with a non-zero ResponseCode
            ProviderError: Daraja answered with an HTTP error
            InternalError: Network failure or unexpected response shape
        """
        if not phone_number or not amount:
            raise MissingField("Phone number and amount are required fields.")

        phone = normalize_phone_number(phone_number)
        if not phone:
            raise InvalidPhoneFormat(
                "Invalid phone number format. Expected formats: "
                "07XXXXXXXX, 2547XXXXXXXX, or XXXXXXXXX (9 digits)"
            )

        response = self._call(EP_STK_PUSH, lambda: self._build_push_request(phone, amount), token)

        if response.get("ResponseCode") != SUCCESS_CODE:
            logger.warning(
                "STK push rejected: %s - %s",
                response.get("ResponseCode"),
                response.get("ResponseDescription")
            )
            raise RequestRejected(response.get("ResponseDescription"), response=response)

        logger.info("STK push accepted: %s", response.get("CheckoutRequestID"))
        return StkPushResult(
            checkout_request_id=response.get("CheckoutRequestID"),
            merchant_request_id=response.get("MerchantRequestID"),
            response_description=response.get("ResponseDescription"),
            raw_response=response,
        )

    def query_status(self, checkout_request_id: Any, token: Optional[str] = None) -> StatusQueryResult:
        """
        Query the status of an STK push by its CheckoutRequestID

        Raises:
            MissingField: checkout request ID absent
            ProviderError: Daraja answered with an HTTP error
            InternalError: Network failure or unexpected response shape
        """
        if not checkout_request_id:
            raise MissingField("CheckoutRequestID is required")

        response = self._call(
            EP_STK_QUERY,
            lambda: self._build_query_request(checkout_request_id),
            token
        )

        return StatusQueryResult(
            result_code=response.get("ResultCode"),
            result_desc=response.get("ResultDesc"),
            data=response,
        )

    def _build_push_request(self, phone: str, amount: Any) -> Dict[str, Any]:
        password, timestamp = generate_password(
            self.settings.shortcode,
            self.settings.passkey,
            self.settings.timezone
        )
        return {
            "BusinessShortCode": self.settings.shortcode,
            "Password":          password,
            "Timestamp":         timestamp,
            "TransactionType":   self.settings.transaction_type,
            "Amount":            amount,
            "PartyA":            phone,
            "PartyB":            self.settings.shortcode,
            "PhoneNumber":       phone,
            "CallBackURL":       self.settings.callback_url,
            "AccountReference":  self.settings.account_reference,
            "TransactionDesc":   self.settings.transaction_desc,
        }

    def _build_query_request(self, checkout_request_id: Any) -> Dict[str, Any]:
        password, timestamp = generate_password(
            self.settings.shortcode,
            self.settings.passkey,
            self.settings.timezone
        )
        return {
            "BusinessShortCode": self.settings.shortcode,
            "Password":          password,
            "Timestamp":         timestamp,
            "CheckoutRequestID": checkout_request_id,
        }

    def _call(self, endpoint: str, build_payload: Callable[[], Dict[str, Any]], token: Optional[str]) -> Dict[str, Any]:
        """Authenticate and submit a single request; the credential is built after the token is in hand."""
        try:
            if token is None:
                token = self.token_provider()
            response = self.transport(endpoint, build_payload(), token)
            if not isinstance(response, dict):
                raise InternalError(f"Unexpected response from {endpoint}: {response!r}")
            return response
        except AppError:
            raise
        except Exception as e:
            logger.error(f"Request to {endpoint} failed: {str(e)}")
            raise InternalError(str(e)) from e
