"""web/ -- Server-rendered HTML pages and form handlers for credportal.

Layer rule: web/ may import from accounts/ and core/. Nothing imports from web/
except asgi.py.
"""
