"""
CLI Commands

Each module exposes one `*_cmd(args) -> int` handler returning an exit code.
"""

from . import build, digest, verify

__all__ = ["build", "digest", "verify"]
