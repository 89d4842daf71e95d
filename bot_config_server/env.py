from __future__ import annotations
import os
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

TRUTHY = "true"

# (config key, environment variable, is_flag)
ENV_FIELDS = (
    ("botName", "BOT_NAME", False),
    ("prefix", "BOT_PREFIX", False),
    ("ownerId", "BOT_OWNER_ID", False),
    ("activityType", "BOT_ACTIVITY_TYPE", False),
    ("statusText", "BOT_STATUS_TEXT", False),
    ("onlineStatus", "BOT_ONLINE_STATUS", False),
    ("debugMode", "BOT_DEBUG_MODE", True),
    ("developerMode", "BOT_DEVELOPER_MODE", True),
    ("syncCommands", "BOT_SYNC_COMMANDS", True),
)


def parse_flag(raw: str) -> bool:
    return raw == TRUTHY

def load(environ: Optional[Mapping[str, str]] = None) -> Mapping[str, Any]:
    """Snapshot the bot's environment defaults.

    Unset variables are left out of the result. An empty flag variable also
    counts as unset; an empty string variable is kept.
    """
    if environ is None:
        environ = os.environ
    out: Dict[str, Any] = {}
    for key, var, is_flag in ENV_FIELDS:
        raw = environ.get(var)
        if raw is None:
            continue
        if is_flag:
            if not raw:
                continue
            out[key] = parse_flag(raw)
        else:
            out[key] = raw
    return MappingProxyType(out)
