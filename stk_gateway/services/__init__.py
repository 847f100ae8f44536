from stk_gateway.services.stk_service import StkService, StkPushResult, StatusQueryResult
from stk_gateway.services.callback_service import CallbackService, CallbackResult, CallbackTransaction

__all__ = [
    'StkService',
    'StkPushResult',
    'StatusQueryResult',
    'CallbackService',
    'CallbackResult',
    'CallbackTransaction',
]
