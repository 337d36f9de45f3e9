"""
Top-level package for the Techinsight Hub API.

All functionality lives in submodules under ``app``; import the ASGI
application as ``techinsight_api.app.main:app``.
"""

__all__ = []
