"""
Opt-in debug output for simulation code.

Enable with ROCKFIELD_DEBUG=1 (environment or .env).
"""

from __future__ import annotations

from config import DEBUG_SIM

_enabled: bool = DEBUG_SIM


def set_debug(enabled: bool) -> None:
    global _enabled
    _enabled = bool(enabled)


def debug_log(tag: str, msg: str) -> None:
    if not _enabled:
        return
    print(f"[{tag}] {msg}")
