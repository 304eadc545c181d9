"""Publink HTTP API layer.

This package provides the Falcon Asynchronous Server Gateway Interface
(ASGI) application that receives Figma webhooks.

Usage
-----
Create the application::

    from publink.api import create_app

    app = create_app()              # settings from the environment
    app = create_app(dependencies)  # explicit config and Linear client

"""

from publink.api.app import AppDependencies, create_app

__all__ = ["AppDependencies", "create_app"]
