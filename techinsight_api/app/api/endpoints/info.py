"""
Service information endpoints: the welcome text and a health report.
"""

import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse
from pymongo.errors import PyMongoError

from ...core.db import Database, get_database


logger = logging.getLogger(__name__)

router = APIRouter()

WELCOME_TEXT = "Welcome to Techinsight Hub!"


@router.get("/", response_class=PlainTextResponse)
def welcome() -> str:
    return WELCOME_TEXT


@router.get("/health")
def health(database: Database = Depends(get_database)) -> Dict[str, Any]:
    """Report whether the database answers.

    Always responds with 200 so the caller can read the details; the
    ``database`` field says ``connected``, ``not connected`` or
    ``error``.
    """
    response: Dict[str, Any] = {
        "backend": "running",
        "database": "not connected",
        "database_name": database.name,
        "collections": [],
    }
    if not database.is_connected:
        return response
    try:
        response["collections"] = sorted(database.collection_names())[:10]
        response["database"] = "connected"
    except PyMongoError as e:
        logger.warning("Health check failed: %s", e)
        response["database"] = "error"
        response["error"] = str(e)[:100]
    return response
