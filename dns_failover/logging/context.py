# Run identifier shared by every log line of one failover pass.

from __future__ import annotations

from contextvars import ContextVar
from uuid import uuid4

_RUN_ID: ContextVar[str | None] = ContextVar("run_id", default=None)


def get_run_id() -> str | None:
    return _RUN_ID.get()


def set_run_id(value: str | None) -> None:
    _RUN_ID.set(value)


def ensure_run_id() -> str:
    run_id = get_run_id()
    if run_id:
        return run_id
    run_id = uuid4().hex
    set_run_id(run_id)
    return run_id


# Copyright (c) Liam Suorsa
