import re
from typing import Optional

from flask import Request

# Checked in order, first match wins
DEVICE_PATTERNS = [
    (re.compile(r"iPhone|iPad|iPod"), "Apple iPhone/iPad"),
    (re.compile(r"Android.*Samsung|Samsung.*Android"), "Samsung Android"),
    (re.compile(r"Android.*Google|Google.*Android"), "Google Android"),
    (re.compile(r"Android"), "Generic Android Mobile"),
    (re.compile(r"Windows NT"), "Windows Desktop"),
    (re.compile(r"Macintosh|Mac OS X"), "Apple Mac/Desktop"),
    (re.compile(r"CrOS"), "Chromebook"),
]

UNKNOWN_DEVICE = "Unknown Device"


def describe_device(user_agent: Optional[str]) -> str:
    if not user_agent:
        return UNKNOWN_DEVICE

    for pattern, description in DEVICE_PATTERNS:
        if pattern.search(user_agent):
            return description

    return UNKNOWN_DEVICE


def get_client_ip(request: Request) -> Optional[str]:
    forwarded_for = request.headers.get("X-Forwarded-For")
    if forwarded_for:
        return forwarded_for.split(",")[0].strip()
    return request.remote_addr
