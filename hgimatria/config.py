from __future__ import annotations
from os import environ as _environ
from typing import Mapping, Optional

TRACE_ENV = "HGIMATRIA_TRACE"

_TRUTHY = {"1", "true", "yes", "on"}

def trace_enabled(environ: Optional[Mapping[str, str]] = None) -> bool:
    """Read the trace flag from HGIMATRIA_TRACE (off unless set to a truthy value)."""
    env = _environ if environ is None else environ
    return env.get(TRACE_ENV, "").strip().lower() in _TRUTHY
