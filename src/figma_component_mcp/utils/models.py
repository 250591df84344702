#!/usr/bin/env python3
"""
Figma 节点与提取结果的数据结构
"""

from dataclasses import dataclass, field
from typing import Dict, Any, List, Optional

# 简化节点保留的字段，其余 API 字段放入 extra
KNOWN_NODE_FIELDS = ("name", "type", "style", "fills", "children")


@dataclass
class FigmaNode:
    """
    Figma 文档树中的一个节点

    name / type / style / fills / children 是提取时使用的字段，
    API 返回的其他字段原样保存在 extra 中。
    """

    name: Optional[str] = None
    type: Optional[str] = None
    style: Any = None
    fills: Any = None
    children: List["FigmaNode"] = field(default_factory=list)
    extra: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Any) -> "FigmaNode":
        """从 API 返回的字典递归构建节点，非字典输入得到空节点"""
        if not isinstance(data, dict):
            return cls()

        children = data.get("children")
        return cls(
            name=data.get("name"),
            type=data.get("type"),
            style=data.get("style"),
            fills=data.get("fills"),
            children=[cls.from_dict(child) for child in children]
            if isinstance(children, list)
            else [],
            extra={k: v for k, v in data.items() if k not in KNOWN_NODE_FIELDS},
        )


@dataclass(frozen=True)
class ProcessedComponent:
    """一个组件集的提取结果"""

    name: str
    props: List[Dict[str, Optional[str]]]
    children: List[Dict[str, Any]]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "props": [dict(prop) for prop in self.props],
            "children": self.children,
        }


@dataclass
class ScanResult:
    """
    组件集扫描结果

    success 为 False 时 message 描述出错的组件，component_sets 为空。
    """

    success: bool
    message: str
    component_sets: List[ProcessedComponent] = field(default_factory=list)
    processed_count: int = 0
    icon_set: Optional[Dict[str, Any]] = None

    @property
    def icon_set_found(self) -> bool:
        return self.icon_set is not None

    @property
    def component_names(self) -> List[str]:
        return [component.name for component in self.component_sets]
