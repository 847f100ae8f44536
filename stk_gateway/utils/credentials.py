import base64
from datetime import datetime, tzinfo
from typing import NamedTuple, Optional, Union
from zoneinfo import ZoneInfo

TIMESTAMP_FORMAT = "%Y%m%d%H%M%S"


class ProviderCredential(NamedTuple):
    password: str
    timestamp: str


def generate_password(
    shortcode: str,
    passkey: str,
    tz: Union[str, tzinfo] = "Africa/Nairobi",
    now: Optional[datetime] = None,
) -> ProviderCredential:
    """
    Generate the Lipa na M-Pesa Online password and timestamp.

    Password  = Base64(BusinessShortCode + Passkey + Timestamp)
    Timestamp = YYYYMMDDHHmmss in the provider's timezone (Africa/Nairobi)

    Call once per outbound request; Daraja rejects stale timestamps.
    """
    if isinstance(tz, str):
        tz = ZoneInfo(tz)
    moment = now.astimezone(tz) if now else datetime.now(tz)
    timestamp = moment.strftime(TIMESTAMP_FORMAT)
    raw = f"{shortcode}{passkey}{timestamp}"
    password = base64.b64encode(raw.encode("utf-8")).decode("utf-8")
    return ProviderCredential(password=password, timestamp=timestamp)
