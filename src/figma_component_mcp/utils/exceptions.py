#!/usr/bin/env python3
"""
figma-component-mcp 异常处理模块

统一处理 Figma API、配置以及组件提取相关的错误和异常。
"""

import logging
from typing import Dict, Any, Optional
import httpx

logger = logging.getLogger(__name__)


class FigmaAPIError(Exception):
    """Figma API 相关错误的基类"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class FigmaAuthenticationError(FigmaAPIError):
    """Figma API 认证错误"""

    def __init__(self, message: str = "访问被拒绝：请检查访问令牌权限"):
        super().__init__(message, 403)


class FigmaNotFoundError(FigmaAPIError):
    """Figma API 资源未找到错误"""

    def __init__(self, message: str = "文件未找到：请检查文件密钥是否正确"):
        super().__init__(message, 404)


class FigmaRateLimitError(FigmaAPIError):
    """Figma API 速率限制错误"""

    def __init__(self, message: str = "请求频率过高：已达到API速率限制，请稍后重试"):
        super().__init__(message, 429)


class ConfigurationError(Exception):
    """缺少必需的配置项（访问令牌、文件密钥等）"""


class ComponentsPageNotFoundError(Exception):
    """Figma 文件中没有名为 Components 的页面"""

    def __init__(self, message: str = "Components page not found in Figma file"):
        super().__init__(message)


def build_api_error(response: httpx.Response) -> FigmaAPIError:
    """
    根据 Figma API 的失败响应构造对应的异常

    异常信息中包含状态码、状态文本以及响应正文。

    Args:
        response: HTTP 响应对象

    Returns:
        FigmaAPIError 或其子类实例
    """
    error_classes = {
        403: FigmaAuthenticationError,
        404: FigmaNotFoundError,
        429: FigmaRateLimitError,
    }

    error_msg = (
        f"Failed to fetch Figma file: {response.status_code} "
        f"{response.reason_phrase}"
    )
    if response.text:
        error_msg += f" - {response.text}"

    error_class = error_classes.get(response.status_code)
    if error_class is None:
        return FigmaAPIError(error_msg, response.status_code)
    return error_class(error_msg)


def handle_api_error(error: FigmaAPIError, operation_name: str) -> Dict[str, Any]:
    """
    统一处理 Figma API 错误

    Args:
        error: Figma API 异常
        operation_name: 操作名称，用于日志记录

    Returns:
        标准化的错误响应字典
    """
    logger.error(f"Figma {operation_name} API错误 {error.status_code}: {error.message}")
    return {
        "success": False,
        "error": error.message,
        "status_code": error.status_code,
    }


def handle_exception(e: Exception, operation_name: str) -> Dict[str, Any]:
    """
    统一处理异常

    Args:
        e: 异常对象
        operation_name: 操作名称，用于日志记录

    Returns:
        标准化的错误响应字典
    """
    if isinstance(e, FigmaAPIError):
        return handle_api_error(e, operation_name)

    elif isinstance(e, httpx.TimeoutException):
        error_msg = "请求超时：Figma API响应时间过长"
        logger.error(error_msg)
        return {"success": False, "error": error_msg, "status_code": 408}

    elif isinstance(e, httpx.RequestError):
        error_msg = f"网络请求错误: {str(e)}"
        logger.error(error_msg)
        return {"success": False, "error": error_msg, "status_code": 0}

    elif isinstance(e, ComponentsPageNotFoundError):
        error_msg = f"{operation_name}失败: {str(e)}"
        logger.error(error_msg)
        return {"success": False, "error": error_msg, "status_code": 422}

    elif isinstance(e, ConfigurationError):
        error_msg = f"配置错误: {str(e)}"
        logger.error(error_msg)
        return {"success": False, "error": error_msg, "status_code": 500}

    else:
        error_msg = f"{operation_name}时发生未知错误: {str(e)}"
        logger.error(error_msg)
        return {"success": False, "error": error_msg, "status_code": 500}
