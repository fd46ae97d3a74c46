from __future__ import annotations

import re
from datetime import date
from typing import Optional

from ..common.datetime_utils import now_local
from ..core.constants import FILENAME_EXTENSION, FILENAME_PREFIX

# ASCII-only match, case-insensitive, lower-cased afterwards
_UNSAFE = re.compile(r"[^a-z0-9]", re.IGNORECASE | re.ASCII)


def slugify_label(label: str) -> str:
    return _UNSAFE.sub("_", label).lower()


def build_filename(label: str, today: Optional[date] = None) -> str:
    """e.g. ``attendance-report-cs_101___lab-2024-03-07.pdf``."""
    today = today or now_local().date()
    return f"{FILENAME_PREFIX}-{slugify_label(label)}-{today.isoformat()}{FILENAME_EXTENSION}"
