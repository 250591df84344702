"""
Figma Component MCP 工具模块

包含异常处理、配置、Figma 文件获取、组件提取和文件存储等工具功能。
"""

from .exceptions import (
    build_api_error,
    handle_api_error,
    handle_exception,
    FigmaAPIError,
    FigmaAuthenticationError,
    FigmaNotFoundError,
    FigmaRateLimitError,
    ConfigurationError,
    ComponentsPageNotFoundError,
)

from .config import Settings, load_settings

from .figma_api import DEFAULT_API_BASE_URL, fetch_figma_file

from .naming import (
    to_pascal_case,
    to_camel_case,
    normalize_name,
    are_same_component,
)

from .models import FigmaNode, ProcessedComponent, ScanResult

from .component_extractor import (
    extract_children,
    extract_props,
    build_component,
    scan_component_sets,
)

from .storage import ComponentStore

__all__ = [
    # 异常处理
    "build_api_error",
    "handle_api_error",
    "handle_exception",
    "FigmaAPIError",
    "FigmaAuthenticationError",
    "FigmaNotFoundError",
    "FigmaRateLimitError",
    "ConfigurationError",
    "ComponentsPageNotFoundError",
    # 配置
    "Settings",
    "load_settings",
    # 文件获取
    "DEFAULT_API_BASE_URL",
    "fetch_figma_file",
    # 名称转换
    "to_pascal_case",
    "to_camel_case",
    "normalize_name",
    "are_same_component",
    # 组件提取
    "FigmaNode",
    "ProcessedComponent",
    "ScanResult",
    "extract_children",
    "extract_props",
    "build_component",
    "scan_component_sets",
    # 文件存储
    "ComponentStore",
]
