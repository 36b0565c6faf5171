# services/api/routers/sellers.py
from __future__ import annotations

import logging
from typing import Any, Dict

from fastapi import APIRouter, HTTPException, status

from adapters.sheets import SELLERS_READ_RANGE, SELLERS_SHEET
from dependencies import Sheets

logger = logging.getLogger(__name__)
router = APIRouter(tags=["sellers"])


@router.get("/", status_code=status.HTTP_200_OK)
def list_sellers(sheets: Sheets) -> Dict[str, Any]:
    """
    Seller names (column B of the sellers sheet), exactly as the Sheets API
    returns them: {"range", "majorDimension", "values": [[name], ...]}.
    """
    try:
        return sheets.read_range(SELLERS_SHEET, SELLERS_READ_RANGE)
    except Exception as e:
        logger.error(f"Error reading sellers: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))
