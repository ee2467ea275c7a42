"""
asgi.py -- ASGI entry point for credportal.

Run with:  uvicorn asgi:app --reload
           python main.py
"""

from web.app import app

__all__ = ["app"]
