#!/usr/bin/env python3
"""
figma-component-mcp 服务器

"""

import logging
from typing import Dict, Any, Optional
from fastmcp import FastMCP

from .utils import (
    handle_exception,
    load_settings,
    fetch_figma_file,
    scan_component_sets,
    ComponentStore,
)

# 配置日志
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# 创建MCP服务实例
mcp = FastMCP("figma-component-mcp")


async def _extract(
    operation_name: str,
    file_key: Optional[str] = None,
    save: bool = False,
    only_missing: bool = False,
    target_name: Optional[str] = None,
) -> Dict[str, Any]:
    """获取 Figma 文件、扫描组件集，并按需保存结果"""
    try:
        settings = load_settings()
        store = ComponentStore(settings.components_dir)

        data = await fetch_figma_file(
            file_key or settings.file_key,
            settings.access_token,
            api_base_url=settings.api_base_url,
        )

        result = scan_component_sets(
            data.get("document") or {},
            only_missing=only_missing,
            target_name=target_name,
            exists=store.exists,
        )
        if not result.success:
            return {"success": False, "error": result.message}

        response = {
            "success": True,
            "message": result.message,
            "component_sets": [c.to_dict() for c in result.component_sets],
            "processed_count": result.processed_count,
            "icon_set_found": result.icon_set_found,
        }

        if save:
            response.update(store.save_all(result.component_sets))
            logger.warning(
                f"已保存 {len(response['saved'])} 个组件到 {store.directory}"
            )

        return response

    except Exception as e:
        return handle_exception(e, operation_name)


@mcp.tool
async def extract_components(
    save: bool = False,
    file_key: Optional[str] = None,
) -> Dict[str, Any]:
    """
    提取 Figma 文件 Components 页面中的所有组件集。

    每个组件集（COMPONENT_SET）被转换为一个简化的 JSON 描述：
    - `name`: PascalCase 组件名
    - `props`: 从变体名称（如 "state=Hover, size=Large"）汇总出的属性列表，
      同一属性的多个取值合并为 "Hover | Default" 形式
    - `children`: 只保留 name、type、style、fills、children 的子节点树

    Args:
        save (bool): 是否把每个组件写入 components 目录下的 <名称>.json，已存在的文件不会被覆盖。默认为 False。
        file_key (str): 可选，覆盖 FIGMA_FILE_KEY 配置的 Figma 文件标识符。

    Returns:
        Dict[str, Any]: 成功时包含 "message"（文本摘要）、"component_sets"、
        "processed_count" 和 "icon_set_found"；失败时包含 "success": False 和 "error"。
    """
    return await _extract("提取组件", file_key=file_key, save=save)


@mcp.tool
async def extract_missing_components(
    save: bool = True,
    file_key: Optional[str] = None,
) -> Dict[str, Any]:
    """
    只提取尚未保存到 components 目录的组件集。

    已存在 <PascalCase 名称>.json 文件的组件会被跳过。

    Args:
        save (bool): 是否保存新提取的组件。默认为 True。
        file_key (str): 可选，覆盖 FIGMA_FILE_KEY 配置的 Figma 文件标识符。

    Returns:
        Dict[str, Any]: 与 extract_components 相同。
    """
    return await _extract(
        "提取未保存的组件", file_key=file_key, save=save, only_missing=True
    )


@mcp.tool
async def extract_component(
    component_name: str,
    save: bool = False,
    file_key: Optional[str] = None,
) -> Dict[str, Any]:
    """
    提取指定名称的组件集。

    名称比较前会被规范化，例如 "button"、"Button" 和 "BUTTON" 都匹配组件 "Button"，
    但不匹配 "Button Group"。

    Args:
        component_name (str): 要提取的组件名称。
        save (bool): 是否保存提取的组件。默认为 False。
        file_key (str): 可选，覆盖 FIGMA_FILE_KEY 配置的 Figma 文件标识符。

    Returns:
        Dict[str, Any]: 与 extract_components 相同。
    """
    return await _extract(
        "提取指定组件", file_key=file_key, save=save, target_name=component_name
    )
