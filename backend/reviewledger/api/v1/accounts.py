import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse, PlainTextResponse

from reviewledger.lib.api_client import supabase
from reviewledger.services.account_service import ScholarStore
from reviewledger.core.errors import error_payload

router = APIRouter(prefix="/accounts", tags=["Accounts"])
logger = logging.getLogger("reviewledger.accounts")


@router.get("/{address}")
async def get_account(address: str):
    """
    按链上地址查询学者账户
    """
    try:
        scholar = ScholarStore(supabase).find_by_id(address)
    except Exception as e:
        logger.error(f"Scholar lookup for {address} failed: {e}")
        return JSONResponse(status_code=500, content=error_payload(e))

    if scholar is None:
        return PlainTextResponse("No scholar found", status_code=404)
    return scholar.model_dump()
