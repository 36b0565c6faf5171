# services/api/routers/sells.py
from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, HTTPException, status

from adapters.sheets import SELLS_APPEND_RANGE, SELLS_SHEET, updated_rows
from core.timestamps import server_timestamp
from core.validation import validate_sale
from dependencies import AppSettings, Sheets
from models import Sale
from schemas.sale import SaleCreate, SaleOut

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/sells", tags=["sells"])


@router.post("", response_model=SaleOut, status_code=status.HTTP_200_OK)
def create_sale(sheets: Sheets, settings: AppSettings, payload: Optional[SaleCreate] = None):
    """
    Record one sale in sells!A:I.

    Defaults applied before writing:
    - paymentMethod -> "none" for "No Pago" (and when absent)
    - timestamp -> server local time when absent
    - remarkText -> "none" when absent
    """
    payload = payload or SaleCreate()
    validate_sale(payload)

    try:
        sale = Sale.from_api(
            payload.model_dump(),
            server_timestamp=server_timestamp(settings.timestamp_timezone),
        )
        result = sheets.append_rows(SELLS_SHEET, SELLS_APPEND_RANGE, [sale.to_row()])
    except Exception as e:
        logger.error(f"Error saving seller data: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))

    logger.info("✅ All data was successfully saved")
    return {
        "message": "Seller data saved successfully",
        **sale.to_api(),
        "updatedRows": updated_rows(result),
    }
