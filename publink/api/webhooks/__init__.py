"""Webhook resources relaying Figma events to Linear."""

from __future__ import annotations

from .resources import CreateIssueResource, CreateIssueResourceDependencies

__all__ = ["CreateIssueResource", "CreateIssueResourceDependencies"]
