# services/api/routers/clients.py
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, HTTPException, status

from adapters.sheets import (
    CLIENTS_APPEND_RANGE,
    CLIENTS_READ_RANGE,
    CLIENTS_SHEET,
    updated_rows,
)
from core.validation import validate_client
from dependencies import Sheets
from models import Client
from schemas.client import ClientAppendOut, ClientCreate

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/clients", tags=["clients"])


@router.get("", status_code=status.HTTP_200_OK)
def list_clients(sheets: Sheets) -> Dict[str, Any]:
    """
    Client rows (columns B..D: dni, client name, quantity), passed through
    from the Sheets API unchanged.
    """
    try:
        return sheets.read_range(CLIENTS_SHEET, CLIENTS_READ_RANGE)
    except Exception as e:
        logger.error(f"Error reading clients: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))


@router.post("", response_model=ClientAppendOut, status_code=status.HTTP_200_OK)
def create_client(sheets: Sheets, payload: Optional[ClientCreate] = None):
    """Append [sellerName, dni, clientName, quantity] to clients!A:D."""
    payload = payload or ClientCreate()
    validate_client(payload)

    client = Client.from_api(payload.model_dump())
    try:
        result = sheets.append_rows(CLIENTS_SHEET, CLIENTS_APPEND_RANGE, [client.to_row()])
    except Exception as e:
        logger.error(f"Error saving client: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))

    rows = updated_rows(result)
    logger.info(f"✅ Client saved for seller {client.seller_name} ({rows} row)")
    return {"data": result, "updatedRows": rows}
