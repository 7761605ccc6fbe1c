import os
from dataclasses import dataclass
from typing import Optional


DEFAULT_ACCOUNT = "0xb454b9e3fB8307AE28d2E0243c5e99A47236a2e0"


def _env_bool(key: str, default: bool) -> bool:
    raw = os.environ.get(key)
    if raw is None:
        return default
    lowered = raw.strip().lower()
    return lowered in {"1", "true", "yes", "y", "on"}


def _env_float(key: str) -> Optional[float]:
    raw = (os.environ.get(key) or "").strip()
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError:
        return None


@dataclass(frozen=True)
class AppConfig:
    """
    Application Environment Config
    """
    env: str  # 'development', 'staging', 'production'
    supabase_url: str
    supabase_key: str
    api_prefix: str

    @staticmethod
    def from_env() -> "AppConfig":
        env = (os.environ.get("APP_ENV") or "development").strip().lower()
        supabase_url = (os.environ.get("SUPABASE_URL") or "").strip()
        supabase_key = (os.environ.get("SUPABASE_SERVICE_ROLE_KEY") or "").strip()

        # 中文注释: 默认不加前缀，路由与前端约定保持一致（/accounts、/reviews）。
        api_prefix = (os.environ.get("API_PREFIX") or "").strip().rstrip("/")
        if api_prefix and not api_prefix.startswith("/"):
            api_prefix = f"/{api_prefix}"

        return AppConfig(
            env=env,
            supabase_url=supabase_url,
            supabase_key=supabase_key,
            api_prefix=api_prefix,
        )

# Global Config Instance
app_config = AppConfig.from_env()


@dataclass(frozen=True)
class LedgerConfig:
    """
    账本网关（合约连接）配置

    中文注释:
    1) rpc_url 指向 JSON-RPC 网关，由网关负责签名与上链。
    2) timeout 缺省为 None：本层不对账本调用设置超时，网关挂起时请求同样挂起。
    """

    rpc_url: str
    contract_address: Optional[str]
    timeout: Optional[float]

    @staticmethod
    def from_env() -> "LedgerConfig":
        rpc_url = (os.environ.get("LEDGER_RPC_URL") or "").strip()
        contract_address = (os.environ.get("LEDGER_CONTRACT_ADDRESS") or "").strip() or None
        timeout = _env_float("LEDGER_TIMEOUT_SECONDS")
        if timeout is not None and timeout <= 0:
            timeout = None

        return LedgerConfig(
            rpc_url=rpc_url,
            contract_address=contract_address,
            timeout=timeout,
        )


@dataclass(frozen=True)
class SentryConfig:
    enabled: bool
    dsn: Optional[str]
    environment: str
    traces_sample_rate: float

    @staticmethod
    def from_env() -> "SentryConfig":
        dsn = (os.environ.get("SENTRY_DSN") or "").strip() or None
        # 有 DSN 时默认开启，可用 SENTRY_ENABLED=0 显式关闭
        enabled = _env_bool("SENTRY_ENABLED", dsn is not None)
        environment = (
            os.environ.get("SENTRY_ENVIRONMENT") or os.environ.get("APP_ENV") or "development"
        ).strip()

        rate = _env_float("SENTRY_TRACES_SAMPLE_RATE")
        if rate is None or rate < 0 or rate > 1:
            rate = 0.0

        return SentryConfig(
            enabled=enabled,
            dsn=dsn,
            environment=environment,
            traces_sample_rate=rate,
        )


@dataclass(frozen=True)
class ClientConfig:
    """
    Review submission client settings.

    `account` is a placeholder submitter address used for the whole session;
    there is no identity system behind it.
    """

    base_url: str
    account: str

    @staticmethod
    def from_env() -> "ClientConfig":
        base_url = (os.environ.get("REVIEW_API_BASE_URL") or "http://localhost:4000").strip().rstrip("/")
        account = (os.environ.get("REVIEW_ACCOUNT") or DEFAULT_ACCOUNT).strip()
        return ClientConfig(base_url=base_url, account=account)


def parse_frontend_origins() -> list[str]:
    """
    解析允许跨域的前端 Origins。

    中文注释:
    - 本地默认: http://localhost:3000
    - 生产/预发: 通过 FRONTEND_ORIGIN 或 FRONTEND_ORIGINS 注入（逗号分隔）
    """
    origins: list[str] = []

    single = (os.environ.get("FRONTEND_ORIGIN") or "").strip()
    if single:
        origins.append(single.rstrip("/"))

    many = (os.environ.get("FRONTEND_ORIGINS") or "").strip()
    if many:
        for part in many.split(","):
            o = (part or "").strip().rstrip("/")
            if o:
                origins.append(o)

    if not origins:
        origins = ["http://localhost:3000"]

    # 去重保持顺序
    deduped: list[str] = []
    seen: set[str] = set()
    for o in origins:
        if o not in seen:
            seen.add(o)
            deduped.append(o)
    return deduped
