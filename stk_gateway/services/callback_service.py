"""
Callback Service
Interprets the STK push result that Safaricom POSTs to the CallBackURL
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from marshmallow import ValidationError

from stk_gateway.errors import InvalidMetadata, InvalidPayload
from stk_gateway.schemas.webhook_schema import MPesaCallbackSchema
from stk_gateway.utils.logger import get_logger

logger = get_logger(__name__)

callback_schema = MPesaCallbackSchema()


@dataclass
class CallbackTransaction:
    amount: Any
    mpesa_code: Any
    phone: Any
    date: Any


@dataclass
class CallbackResult:
    result_code: Any
    result_desc: Optional[str]
    transaction: Optional[CallbackTransaction] = None

    @property
    def succeeded(self) -> bool:
        return self.transaction is not None


def is_success_code(result_code: Any) -> bool:
    """The callback carries ResultCode as a number; only a numeric 0 is success."""
    if isinstance(result_code, bool):
        return False
    return isinstance(result_code, (int, float)) and result_code == 0


def get_item_value(items: List[Dict[str, Any]], name: str) -> Any:
    """Value of the first metadata item called name, or None."""
    for item in items:
        if isinstance(item, dict) and item.get("Name") == name:
            return item.get("Value")
    return None


class CallbackService:
    """Service for STK push callbacks"""

    @staticmethod
    def handle_callback(payload: Optional[Dict[str, Any]]) -> CallbackResult:
        """
        Process an STK push callback

        Args:
            payload: Parsed callback JSON

        Returns:
            CallbackResult; transaction is set only for ResultCode 0

        Raises:
            InvalidPayload: payload, Body or Body.stkCallback missing
            InvalidMetadata: ResultCode 0 without CallbackMetadata.Item
        """
        if not payload:
            raise InvalidPayload("Invalid callback data")
        try:
            data = callback_schema.load(payload)
        except ValidationError as e:
            logger.warning(f"Rejected callback payload: {e.messages}")
            raise InvalidPayload("Invalid callback data") from e

        stk = data["Body"]["stkCallback"]
        result_code = stk.get("ResultCode")
        result_desc = stk.get("ResultDesc")

        logger.info(
            "STK callback %s: ResultCode=%s ResultDesc=%s",
            stk.get("CheckoutRequestID"),
            result_code,
            result_desc
        )

        if not is_success_code(result_code):
            return CallbackResult(result_code=result_code, result_desc=result_desc)

        metadata = stk.get("CallbackMetadata")
        items = metadata.get("Item") if isinstance(metadata, dict) else None
        if not isinstance(items, list):
            raise InvalidMetadata("Invalid callback metadata")

        transaction = CallbackTransaction(
            amount=get_item_value(items, "Amount"),
            mpesa_code=get_item_value(items, "MpesaReceiptNumber"),
            phone=get_item_value(items, "PhoneNumber"),
            date=get_item_value(items, "TransactionDate"),
        )
        return CallbackResult(result_code=result_code, result_desc=result_desc, transaction=transaction)
