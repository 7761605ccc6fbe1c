import logging
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# 在应用启动前加载环境变量
load_dotenv()

logger = logging.getLogger("reviewledger")

_SENTRY_ENABLED = False
try:
    from reviewledger.core.sentry_init import init_sentry

    _SENTRY_ENABLED = init_sentry()
    if _SENTRY_ENABLED:
        logger.info("[sentry] enabled")
except Exception as e:
    # 中文注释: 零崩溃原则：Sentry 任何异常不得阻塞启动
    logger.warning(f"[sentry] init failed (ignored): {e}")

from reviewledger.api.v1 import accounts, reviews
from reviewledger.core.config import AppConfig, parse_frontend_origins
from reviewledger.core.middleware import ExceptionHandlerMiddleware


@asynccontextmanager
async def lifespan(app: FastAPI):
    cfg = AppConfig.from_env()
    logger.info(f"[startup] env={cfg.env} api_prefix={cfg.api_prefix or '/'}")
    yield


app = FastAPI(
    title="Review Ledger API",
    description="Manuscript reviews and scholar accounts backed by a ledger",
    version="1.0.0",
    lifespan=lifespan,
)

if _SENTRY_ENABLED:
    try:
        from sentry_sdk.integrations.asgi import SentryAsgiMiddleware

        app.add_middleware(SentryAsgiMiddleware)
    except Exception as e:
        logger.warning(f"[sentry] middleware attach failed (ignored): {e}")

# === 中间件配置 ===
# 1. 跨域资源共享 (CORS) - 允许前端访问
app.add_middleware(
    CORSMiddleware,
    allow_origins=parse_frontend_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# 2. 统一异常处理 + 请求日志
app.add_middleware(ExceptionHandlerMiddleware)

# === 路由注册 ===
_prefix = AppConfig.from_env().api_prefix
app.include_router(accounts.router, prefix=_prefix)
app.include_router(reviews.router, prefix=_prefix)


@app.get("/")
async def root():
    return {"message": "Review Ledger API is running", "docs": "/docs"}
