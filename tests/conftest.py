"""
Shared fixtures.

Pins the library's local timezone to Asia/Jakarta (UTC+7, no DST) so
local-time conversions are identical on every machine.
"""

import pytest
import pytz

from xutils.config.settings import Settings

JAKARTA = pytz.timezone("Asia/Jakarta")


@pytest.fixture(autouse=True)
def local_tz(monkeypatch):
    """Fixed local timezone for every test"""
    monkeypatch.setattr(Settings, "LOCAL_TZ", JAKARTA)
    return JAKARTA
