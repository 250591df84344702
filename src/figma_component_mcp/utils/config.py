#!/usr/bin/env python3
"""
配置模块

从 .env 文件和环境变量读取 Figma 访问配置。
"""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv, find_dotenv

from .exceptions import ConfigurationError
from .figma_api import DEFAULT_API_BASE_URL


@dataclass(frozen=True)
class Settings:
    access_token: str
    file_key: str
    project_dir: Path
    api_base_url: str = DEFAULT_API_BASE_URL

    @property
    def components_dir(self) -> Path:
        """组件 JSON 文件的输出目录"""
        return self.project_dir / "components"


def load_settings() -> Settings:
    """
    读取配置

    需要的环境变量：
    - FIGMA_ACCESS_TOKEN: Figma 个人访问令牌（必需）
    - FIGMA_FILE_KEY: Figma 文件密钥（必需）
    - PROJECT_DIR: 输出根目录，默认当前目录
    - FIGMA_API_BASE_URL: Figma API 基础URL

    Raises:
        ConfigurationError: 缺少必需的环境变量
    """
    # 加载当前目录下 .env 文件中的环境变量，已设置的环境变量优先
    load_dotenv(find_dotenv(usecwd=True))

    access_token = os.getenv("FIGMA_ACCESS_TOKEN")
    file_key = os.getenv("FIGMA_FILE_KEY")

    missing = [
        name
        for name, value in (
            ("FIGMA_ACCESS_TOKEN", access_token),
            ("FIGMA_FILE_KEY", file_key),
        )
        if not value
    ]
    if missing:
        raise ConfigurationError(f"缺少必需的环境变量: {', '.join(missing)}")

    return Settings(
        access_token=access_token,
        file_key=file_key,
        project_dir=Path(os.getenv("PROJECT_DIR") or os.getcwd()),
        api_base_url=os.getenv("FIGMA_API_BASE_URL") or DEFAULT_API_BASE_URL,
    )
