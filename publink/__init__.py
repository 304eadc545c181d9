"""Relay Figma library publish webhooks into Linear issues."""

from __future__ import annotations

__version__ = "0.1.0"
