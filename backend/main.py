"""
兼容入口：本地开发时在 backend/ 目录下执行 `uvicorn main:app`。

真实 FastAPI 实例定义在 `reviewledger.main` 中（随包安装），这里仅做转发。
"""

from reviewledger.main import app

__all__ = ["app"]
