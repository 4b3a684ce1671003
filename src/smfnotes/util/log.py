from __future__ import annotations
import sys

_verbose = False

def set_verbose(flag: bool) -> None:
    global _verbose
    _verbose = bool(flag)

def info(tag: str, msg: str) -> None:
    """Diagnosezeile nach stderr, nur im Verbose-Modus."""
    if _verbose:
        print(f"[{tag}] {msg}", file=sys.stderr)

def error(tag: str, msg: str) -> None:
    print(f"[{tag}] ERROR: {msg}", file=sys.stderr)
