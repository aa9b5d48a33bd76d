"""Centralized error handling and responses - DRY principle"""
import logging
from typing import Tuple
from booktoggle.exceptions.exceptions import (
    AlreadyActiveError, AlreadyInactiveError, InvalidSeedError, SeedReadError, StoreError
)

logger = logging.getLogger(__name__)



# ============= ERROR HANDLERS =============

def handle_service_error(e: Exception) -> Tuple[dict, int]:
    """Map a controller exception to a JSON error body and HTTP status"""

    if isinstance(e, (AlreadyActiveError, AlreadyInactiveError, InvalidSeedError)):
        return {"error": str(e)}, 400

    elif isinstance(e, (StoreError, SeedReadError)):
        logger.error(f"{type(e).__name__}: {e}")
        return {"error": str(e)}, 500

    else:
        sanitized_error = str(e).replace('\n', ' ').replace('\r', ' ')[:500]
        logger.exception(f"Unexpected error: {sanitized_error}")
        return {"error": sanitized_error or "Server error"}, 500
