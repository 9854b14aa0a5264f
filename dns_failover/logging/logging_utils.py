"""Keep credentials out of log output."""

from __future__ import annotations

MASK_PLACEHOLDER = "***"


def mask_secret(value: str | None, prefix: int = 4) -> str:
    # Show only the first characters of a credential.
    if not value:
        return MASK_PLACEHOLDER

    trimmed = value[:prefix]
    return f"{trimmed}…" if len(value) > prefix else MASK_PLACEHOLDER


# Copyright (c) Liam Suorsa
