"""
Custom Validators
Normalisation helpers for values sent to Daraja
"""

import re
from typing import Any, Optional

_NON_DIGITS = re.compile(r'\D')


def normalize_phone_number(phone: Any) -> Optional[str]:
    """
    Normalise a phone number to Safaricom's expected format (2547XXXXXXXX)

    Accepts: 0712345678, 254712345678, 712345678 and any punctuated
    variant of them (+254 712-345-678).

    Args:
        phone: Raw phone number, string or number

    Returns:
        12-digit number starting with 254, or None if the input is not
        one of the accepted shapes
    """
    if phone is None or phone == '':
        return None

    digits = _NON_DIGITS.sub('', str(phone))

    if digits.startswith('0') and len(digits) == 10:
        return f'254{digits[1:]}'
    if digits.startswith('254') and len(digits) == 12:
        return digits
    if len(digits) == 9:
        return f'254{digits}'

    return None
