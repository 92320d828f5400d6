"""
Application package initializer.

The project is organised in three layers: ``repositories`` holds the
JSON file storage, ``services`` the validation and orchestration logic
on top of it, and ``api`` the HTTP routers (JSON endpoints and
rendered pages).  ``core`` contains configuration, logging and the
helpers shared between layers.
"""

from .main import app  # noqa: F401
