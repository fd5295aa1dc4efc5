# src/treerun/telemetry/logger/processors.py

"""
Custom structlog processors for treerun.
"""

import logging
from structlog.typing import EventDict, WrappedLogger

LOG_EMOJIS = {
    logging.DEBUG: "🐛",
    logging.INFO: "ℹ️",
    logging.WARNING: "⚠️",
    logging.ERROR: "❌",
    logging.CRITICAL: "💥",
}

# Keys added by stdlib logging that add nothing to rendered events.
_NOISE_KEYS = ("_record", "_from_structlog", "color_message")


def add_emoji_processor(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Prefixes the event with an emoji for its level, unless one is given."""
    emoji = event_dict.pop("emoji", None)
    if emoji is None:
        level = logging.getLevelNamesMapping().get(method_name.upper(), logging.INFO)
        emoji = LOG_EMOJIS.get(level, "➡️")
    event = event_dict.get("event")
    if isinstance(event, str):
        event_dict["event"] = f"{emoji} {event}"
    return event_dict


def remove_extra_keys_processor(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    for key in _NOISE_KEYS:
        event_dict.pop(key, None)
    return event_dict

# 🔼⚙️
