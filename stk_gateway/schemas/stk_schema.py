from marshmallow import Schema, fields, EXCLUDE


class StkPushRequestSchema(Schema):
    """STK push request schema; presence of both fields is checked by the service"""

    class Meta:
        unknown = EXCLUDE

    phoneNumber = fields.Raw(load_default=None, allow_none=True)
    amount = fields.Raw(load_default=None, allow_none=True)


class StatusQueryRequestSchema(Schema):
    """STK push status query schema"""

    class Meta:
        unknown = EXCLUDE

    checkoutRequestID = fields.Raw(load_default=None, allow_none=True)


class StkPushResponseSchema(Schema):
    """Accepted STK push response"""
    message = fields.Str(dump_default="STK push request sent successfully.")
    checkout_request_id = fields.Raw(data_key="checkoutRequestID")
    merchant_request_id = fields.Raw(data_key="merchantRequestID")
    response_description = fields.Raw(data_key="responseDescription")
