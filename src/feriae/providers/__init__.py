"""Registry of the built-in holiday providers.

``REGISTRY`` maps ISO 3166 codes to providers and is built once at
import; treat it as read-only.
"""

from __future__ import annotations

from feriae.collection import Provider
from feriae.providers.australia import AUSTRALIA, WESTERN_AUSTRALIA
from feriae.providers.ireland import IRELAND
from feriae.providers.japan import JAPAN
from feriae.providers.netherlands import NETHERLANDS
from feriae.providers.usa import USA

PROVIDERS: tuple[Provider, ...] = (
    AUSTRALIA,
    WESTERN_AUSTRALIA,
    IRELAND,
    JAPAN,
    NETHERLANDS,
    USA,
)

REGISTRY: dict[str, Provider] = {p.code: p for p in PROVIDERS}

BY_NAME: dict[str, Provider] = {p.name: p for p in PROVIDERS}

__all__ = [
    "AUSTRALIA",
    "BY_NAME",
    "IRELAND",
    "JAPAN",
    "NETHERLANDS",
    "PROVIDERS",
    "REGISTRY",
    "USA",
    "WESTERN_AUSTRALIA",
]
