from typing import Any

from django.conf import settings

DEFAULTS = {
    "VALID_CUSTOMERS": ["PLUTO1", "PLUTO2"],
    "STRICT_DATE_FORMAT": False,
}


def get_setting(name: str) -> Any:
    if name not in DEFAULTS:
        raise KeyError(f"Unknown trade validation setting: {name}")
    user_settings = getattr(settings, "TRADE_VALIDATION", None) or {}
    return user_settings.get(name, DEFAULTS[name])
