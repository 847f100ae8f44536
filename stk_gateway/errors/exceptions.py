class AppError(Exception):
    status_code = 500
    error = "Application error"

    def __init__(self, message, status_code=None):
        super().__init__(message)
        if status_code:
            self.status_code = status_code
        self.message = message

    def to_dict(self):
        return {"error": self.message}


class MissingField(AppError):
    status_code = 400
    error = "Missing field"


class InvalidPhoneFormat(AppError):
    status_code = 400
    error = "Invalid phone format"


class InvalidPayload(AppError):
    status_code = 400
    error = "Invalid payload"


class InvalidMetadata(AppError):
    status_code = 400
    error = "Invalid metadata"


class RequestRejected(AppError):
    """Provider acknowledged the request with a non-zero ResponseCode"""
    status_code = 400
    error = "Failed to initiate STK push."

    def __init__(self, response_description, response=None):
        super().__init__(response_description)
        self.response_description = response_description
        self.response = response or {}

    def to_dict(self):
        return {
            "error": self.error,
            "responseDescription": self.response_description,
        }


class ProviderError(AppError):
    """Provider answered with an HTTP error; status and message are passed through"""
    error = "Safaricom API Error"

    def __init__(self, message, status_code=502, body=None):
        super().__init__(message, status_code)
        self.body = body

    def to_dict(self):
        return {"error": self.error, "message": self.message}


class InternalError(AppError):
    status_code = 500
    error = "Internal Server Error"

    def to_dict(self):
        return {"error": self.error, "message": self.message}
