"""
Unit Tests for the Lipa na M-Pesa Online password
"""

import base64
import re
from datetime import datetime, timezone
from zoneinfo import ZoneInfo

from stk_gateway.utils.credentials import ProviderCredential, generate_password

NAIROBI = ZoneInfo("Africa/Nairobi")


class TestGeneratePassword:

    def test_password_decodes_to_shortcode_passkey_timestamp(self):
        credential = generate_password("174379", "test_passkey")

        decoded = base64.b64decode(credential.password).decode("utf-8")
        assert decoded == f"174379test_passkey{credential.timestamp}"

    def test_timestamp_is_fourteen_digits(self):
        credential = generate_password("174379", "test_passkey")
        assert re.fullmatch(r"\d{14}", credential.timestamp)

    def test_timestamp_matches_call_time(self):
        before = datetime.now(NAIROBI).replace(microsecond=0)
        credential = generate_password("174379", "test_passkey")
        after = datetime.now(NAIROBI)

        stamped = datetime.strptime(credential.timestamp, "%Y%m%d%H%M%S").replace(tzinfo=NAIROBI)
        assert before <= stamped <= after

    def test_timestamp_uses_provider_timezone(self):
        # 21:30 UTC is 00:30 the next day in Nairobi (UTC+3)
        now = datetime(2024, 1, 31, 21, 30, 5, tzinfo=timezone.utc)

        credential = generate_password("600000", "key", now=now)

        assert credential.timestamp == "20240201003005"
        assert credential == ProviderCredential(
            password=base64.b64encode(b"600000key20240201003005").decode("utf-8"),
            timestamp="20240201003005",
        )

    def test_configurable_timezone(self):
        now = datetime(2024, 1, 31, 21, 30, 5, tzinfo=timezone.utc)
        credential = generate_password("600000", "key", tz="UTC", now=now)
        assert credential.timestamp == "20240131213005"

    def test_fresh_timestamp_per_call(self):
        first = generate_password("174379", "pk", now=datetime(2024, 5, 1, 8, 0, 0, tzinfo=NAIROBI))
        second = generate_password("174379", "pk", now=datetime(2024, 5, 1, 8, 0, 1, tzinfo=NAIROBI))
        assert first.timestamp != second.timestamp
        assert first.password != second.password
