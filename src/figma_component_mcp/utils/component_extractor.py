#!/usr/bin/env python3
"""
Figma 组件提取模块

从 Figma 文档的 Components 页面中找出组件集（COMPONENT_SET）和图标集（Icon），
并把每个组件集转换为简化的 JSON 描述：

    {
        "name": "Button",
        "props": [{"name": "state", "type": "Hover | Default"}],
        "children": [{"name": ..., "type": ..., "style": ..., "fills": ..., "children": [...]}]
    }
"""

import logging
from typing import Dict, Any, List, Optional, Callable

from .exceptions import ComponentsPageNotFoundError
from .models import FigmaNode, ProcessedComponent, ScanResult
from .naming import to_pascal_case, to_camel_case, are_same_component

logger = logging.getLogger(__name__)

COMPONENTS_PAGE_NAME = "Components"
ICON_SET_NAME = "Icon"
COMPONENT_SET_TYPE = "COMPONENT_SET"

PropSpec = Dict[str, Optional[str]]


def extract_children(nodes: Any) -> List[Dict[str, Any]]:
    """
    递归提取子节点，只保留 name、type、style、fills 和 children

    Args:
        nodes: 节点列表（字典或 FigmaNode），非列表输入返回空列表

    Returns:
        简化后的节点列表，保持原有的层级和兄弟顺序
    """
    if not isinstance(nodes, list):
        return []

    simplified = []
    for node in nodes:
        if not isinstance(node, FigmaNode):
            node = FigmaNode.from_dict(node)

        child: Dict[str, Any] = {"name": node.name, "type": node.type}
        if node.style is not None:
            child["style"] = node.style
        if node.fills is not None:
            child["fills"] = node.fills
        child["children"] = extract_children(node.children)
        simplified.append(child)

    return simplified


def _parse_variant_name(variant_name: str) -> List[PropSpec]:
    """把 "state=Hover, size=Large" 解析为属性列表"""
    props = []
    for part in variant_name.split(", "):
        key, separator, value = part.partition("=")
        if not separator:
            value = None

        props.append(
            {
                "name": to_camel_case(key),
                "type": "boolean" if value in ("True", "False") else value,
            }
        )
    return props


def extract_props(variant_children: List[Dict[str, Any]]) -> Dict[str, PropSpec]:
    """
    从变体子节点的名称中汇总组件属性

    同名属性的不同取值合并为 "A | B" 形式的联合类型。判断取值是否已存在时使用
    子串匹配，例如已有 "Large" 时不会再追加 "Large" 或 "Lar"。

    没有 "=" 的描述取值为 None：先出现 None 时会被之后的具体取值替换，
    已有取值时再出现 None 则保持不变。

    Args:
        variant_children: 组件集的子节点列表

    Returns:
        以 camelCase 属性名为键的字典，按首次出现的顺序排列
    """
    combined: Dict[str, PropSpec] = {}

    for child in variant_children:
        variant_name = child.get("name") if isinstance(child, dict) else None
        if not isinstance(variant_name, str):
            raise ValueError(f"变体名称无效: {variant_name!r}")

        for prop in _parse_variant_name(variant_name):
            existing = combined.get(prop["name"])
            if existing is None:
                combined[prop["name"]] = dict(prop)
            elif prop["type"] is None:
                continue
            elif existing["type"] is None:
                existing["type"] = prop["type"]
            elif prop["type"] not in existing["type"]:
                existing["type"] = f"{existing['type']} | {prop['type']}"

    return combined


def build_component(component_set: Dict[str, Any]) -> ProcessedComponent:
    """
    把一个组件集节点转换为 ProcessedComponent

    Raises:
        ValueError: 组件集没有子节点列表，或变体名称无效
    """
    children = component_set.get("children")
    if not isinstance(children, list):
        raise ValueError("组件集缺少 children 列表")

    return ProcessedComponent(
        name=to_pascal_case(component_set.get("name") or ""),
        props=list(extract_props(children).values()),
        children=extract_children(children),
    )


def find_components_page(document: Dict[str, Any]) -> Dict[str, Any]:
    """查找名为 Components 的页面"""
    for page in document.get("children") or []:
        if isinstance(page, dict) and page.get("name") == COMPONENTS_PAGE_NAME:
            return page

    logger.warning("文档中没有 Components 页面")
    raise ComponentsPageNotFoundError()


def format_summary(
    processed_count: int,
    component_sets: List[ProcessedComponent],
    icon_set: Optional[Dict[str, Any]],
) -> str:
    """生成返回给用户的文本摘要"""
    lines = [
        f"Successfully processed {processed_count} components.",
        "",
        f"Component sets: {len(component_sets)}",
        f"Icon set: {'Found' if icon_set else 'Not found'}",
        "",
        "Component paths:",
    ]
    lines.extend(f"- {component.name}" for component in component_sets)
    if icon_set:
        lines.append(f"- Icon set: {ICON_SET_NAME}")
    return "\n".join(lines)


def scan_component_sets(
    document: Dict[str, Any],
    only_missing: bool = False,
    target_name: Optional[str] = None,
    exists: Optional[Callable[[str], bool]] = None,
) -> ScanResult:
    """
    扫描 Components 页面并提取组件集

    页面的每个分区（section）下：
    - 名为 "Icon" 的节点记为图标集，后出现的覆盖先出现的；
    - 类型为 COMPONENT_SET 的节点在通过过滤条件后被提取。

    任意一个组件集处理失败都会立即中止扫描，返回不含任何组件的失败结果。

    Args:
        document: Figma 文件的 document 节点
        only_missing: 为 True 时跳过 exists 返回 True 的组件
        target_name: 只提取规范化名称与之相同的组件
        exists: 按 PascalCase 名称检查组件是否已提取

    Returns:
        ScanResult

    Raises:
        ComponentsPageNotFoundError: 没有 Components 页面
    """
    if only_missing and exists is None:
        raise ValueError("only_missing 需要提供 exists 检查函数")

    page = find_components_page(document)

    component_sets: List[ProcessedComponent] = []
    icon_set = None
    processed_count = 0

    for section in page.get("children") or []:
        items = section.get("children") if isinstance(section, dict) else None
        if not items:
            continue

        for item in items:
            name = item.get("name")
            if name == ICON_SET_NAME:
                icon_set = item
                continue
            if item.get("type") != COMPONENT_SET_TYPE:
                continue

            component_name = to_pascal_case(name or "")
            if only_missing and exists(component_name):
                logger.info(f"组件已存在，跳过: {component_name}")
                continue
            if target_name and not are_same_component(component_name, target_name):
                continue

            processed_count += 1
            try:
                component_sets.append(build_component(item))
            except Exception as e:
                logger.error(f"处理组件 {name} 时出错: {e}")
                return ScanResult(
                    success=False,
                    message=f"Error processing component {name}: {e}",
                )
            logger.info(f"已提取组件: {name} -> {component_name}")

    return ScanResult(
        success=True,
        message=format_summary(processed_count, component_sets, icon_set),
        component_sets=component_sets,
        processed_count=processed_count,
        icon_set=icon_set,
    )
