#!/usr/bin/env python3
"""
组件文件存储模块

每个组件保存为一个 <PascalCase 名称>.json 文件，已存在的文件不会被覆盖。
"""

import json
import logging
from pathlib import Path
from typing import Dict, List, Iterable, Union

from .models import ProcessedComponent

logger = logging.getLogger(__name__)


class ComponentStore:
    """组件 JSON 文件目录"""

    def __init__(self, directory: Union[str, Path]):
        self.directory = Path(directory)

    def path_for(self, component_name: str) -> Path:
        return self.directory / f"{component_name}.json"

    def exists(self, component_name: str) -> bool:
        """组件是否已经提取过"""
        return self.path_for(component_name).exists()

    def save(self, component: ProcessedComponent) -> bool:
        """
        保存单个组件

        Returns:
            写入返回 True，文件已存在而跳过返回 False
        """
        if not component.name:
            logger.warning("组件名称为空，跳过写入")
            return False

        file_path = self.path_for(component.name)
        if file_path.exists():
            logger.info(f"文件 {file_path} 已存在，跳过写入")
            return False

        self.directory.mkdir(parents=True, exist_ok=True)
        with open(file_path, "w", encoding="utf-8") as f:
            json.dump(component.to_dict(), f, indent=2, ensure_ascii=False)

        logger.info(f"已保存组件: {file_path}")
        return True

    def save_all(self, components: Iterable[ProcessedComponent]) -> Dict[str, List[str]]:
        """批量保存组件，返回写入和跳过的组件名称"""
        saved = []
        skipped = []
        for component in components:
            if self.save(component):
                saved.append(component.name)
            else:
                skipped.append(component.name)
        return {"saved": saved, "skipped": skipped}
