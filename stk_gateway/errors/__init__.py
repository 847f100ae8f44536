from stk_gateway.errors.exceptions import (
    AppError,
    MissingField,
    InvalidPhoneFormat,
    InvalidPayload,
    InvalidMetadata,
    RequestRejected,
    ProviderError,
    InternalError,
)

__all__ = [
    'AppError',
    'MissingField',
    'InvalidPhoneFormat',
    'InvalidPayload',
    'InvalidMetadata',
    'RequestRejected',
    'ProviderError',
    'InternalError',
]
