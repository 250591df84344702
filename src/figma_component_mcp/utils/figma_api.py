#!/usr/bin/env python3
"""
Figma 文件获取模块

通过 Figma REST API 获取完整的文件文档树。
"""

import logging
from typing import Dict, Any, Optional

import httpx

from .exceptions import build_api_error

logger = logging.getLogger(__name__)

DEFAULT_API_BASE_URL = "https://api.figma.com/v1"


async def fetch_figma_file(
    file_key: str,
    access_token: str,
    api_base_url: str = DEFAULT_API_BASE_URL,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> Dict[str, Any]:
    """
    获取 Figma 文件数据

    Args:
        file_key: Figma文件的唯一标识符
        access_token: Figma个人访问令牌
        api_base_url: Figma API 基础URL
        transport: 可选的 httpx 传输层

    Returns:
        Figma API 返回的文件数据，文档树位于 "document" 键下

    Raises:
        FigmaAPIError: API 返回非 200 状态码
        httpx.RequestError: 网络请求失败
    """
    headers = {"X-Figma-Token": access_token, "Content-Type": "application/json"}
    url = f"{api_base_url}/files/{file_key}"

    logger.info(f"正在获取 Figma 文件: {file_key}")
    async with httpx.AsyncClient(timeout=60.0, transport=transport) as client:
        response = await client.get(url, headers=headers)

    if response.status_code != 200:
        raise build_api_error(response)

    logger.info("成功获取 Figma 文件数据")
    return response.json()
