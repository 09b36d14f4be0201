"""
gorun CLI: typer apps for program mode and test mode.
"""

from .main import app, harness_app

__all__ = ["app", "harness_app"]
