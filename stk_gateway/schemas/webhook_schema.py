"""
Callback Validation Schemas
"""

from marshmallow import Schema, fields, validates, ValidationError, EXCLUDE


class MPesaCallbackSchema(Schema):
    """M-Pesa STK callback validation schema"""

    class Meta:
        unknown = EXCLUDE

    Body = fields.Dict(required=True, allow_none=False)

    @validates('Body')
    def validate_body(self, value, **kwargs):
        if not isinstance(value.get('stkCallback'), dict):
            raise ValidationError('Missing stkCallback in Body')


class CallbackTransactionSchema(Schema):
    """Transaction fields extracted from a successful callback"""
    amount = fields.Raw()
    mpesa_code = fields.Raw(data_key="mpesaCode")
    phone = fields.Raw()
    date = fields.Raw()
