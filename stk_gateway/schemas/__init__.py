"""
Schemas Package
Marshmallow schemas for request/response validation
"""

from stk_gateway.schemas.stk_schema import (
    StkPushRequestSchema,
    StatusQueryRequestSchema,
    StkPushResponseSchema
)
from stk_gateway.schemas.webhook_schema import (
    MPesaCallbackSchema,
    CallbackTransactionSchema
)

__all__ = [
    'StkPushRequestSchema',
    'StatusQueryRequestSchema',
    'StkPushResponseSchema',
    'MPesaCallbackSchema',
    'CallbackTransactionSchema'
]
