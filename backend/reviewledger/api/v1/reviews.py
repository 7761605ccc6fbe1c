import logging

from fastapi import APIRouter, Body
from fastapi.responses import JSONResponse

from reviewledger.lib.ledger_client import ledger
from reviewledger.schemas.review import ReviewInput
from reviewledger.core.errors import error_payload
from reviewledger.services.review_service import ReviewService

router = APIRouter(prefix="/reviews", tags=["Reviews"])
logger = logging.getLogger("reviewledger.reviews")


@router.get("/{addr}/{reviewIndex}")
async def get_review(addr: str, reviewIndex: str):
    """
    读取链上评审记录。

    中文注释:
    - 任何读失败（不存在、地址/序号非法、连接异常）对外统一返回 404，
      不区分错误类别；内部类别只进日志。
    """
    lookup = await ReviewService(ledger).get_review(addr, reviewIndex)
    if not lookup.ok or lookup.record is None:
        if lookup.kind == "internal":
            logger.warning(f"Review lookup {addr}/{reviewIndex} collapsed to 404: {lookup.cause}")
        return JSONResponse(status_code=404, content={"message": "Review not found"})
    return lookup.record.model_dump()


@router.post("/{addr}")
async def add_review(addr: str, review: ReviewInput = Body(...)):
    """
    提交评审到合约，成功时原样返回交易结果（至少包含 tx）。
    """
    try:
        result = await ReviewService(ledger).add_review(addr, review)
    except Exception as e:
        # 中文注释: 原样把错误对象返回给调用方（已知会暴露内部细节）
        logger.error(f"addReview for {addr} failed: {e}")
        return JSONResponse(status_code=500, content={"error": error_payload(e)})
    return JSONResponse(status_code=200, content=dict(result))
