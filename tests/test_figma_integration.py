#!/usr/bin/env python3
"""
Figma API 集成测试

真实调用 Figma API 的集成测试，使用 FastMCP 客户端。
需要设置环境变量：
- FIGMA_ACCESS_TOKEN: Figma 个人访问令牌
- FIGMA_FILE_KEY: 含有 Components 页面的 Figma 文件
"""

import os
import pytest
import logging
import json

from fastmcp import Client

# 配置日志
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


class TestFigmaIntegration:
    """Figma API 集成测试类"""

    @classmethod
    def setup_class(cls):
        """测试类初始化，在所有测试方法执行前运行一次"""
        cls.access_token = os.getenv("FIGMA_ACCESS_TOKEN")
        cls.file_key = os.getenv("FIGMA_FILE_KEY")

        if not cls.access_token or not cls.file_key:
            pytest.skip("需要设置 FIGMA_ACCESS_TOKEN 和 FIGMA_FILE_KEY 环境变量")

    def _get_client(self) -> Client:
        """获取 FastMCP 内存客户端"""
        from figma_component_mcp.server import mcp

        return Client(mcp)

    def _extract_result_text(self, result) -> str:
        """从 MCP 结果中提取文本内容"""
        content = getattr(result, "content", result)
        if not content:
            return ""

        first_result = content[0]
        if hasattr(first_result, "text"):
            return first_result.text
        return str(first_result)

    @pytest.mark.asyncio
    async def test_extract_components(self, tmp_path, monkeypatch):
        """测试提取全部组件集"""
        monkeypatch.setenv("PROJECT_DIR", str(tmp_path))

        async with self._get_client() as client:
            result = await client.call_tool("extract_components", {"save": True})

        result_text = self._extract_result_text(result)
        print("----提取组件结果----", result_text)

        data = json.loads(result_text)
        assert data["success"] is True, data.get("error")
        assert data["processed_count"] == len(data["component_sets"])

        for component in data["component_sets"]:
            assert "name" in component, "component 应该包含 name"
            assert "props" in component, "component 应该包含 props"
            assert (tmp_path / "components" / f"{component['name']}.json").exists()
            logger.info(f"组件: {component['name']} ({len(component['props'])} 个属性)")
