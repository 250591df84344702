"""
测试公用数据
"""

import pytest


def make_document(*sections, page_name="Components"):
    """构造只有一个页面的 Figma document"""
    return {
        "id": "0:0",
        "name": "Document",
        "type": "DOCUMENT",
        "children": [
            {"id": "0:1", "name": "Cover", "type": "CANVAS", "children": []},
            {
                "id": "0:2",
                "name": page_name,
                "type": "CANVAS",
                "children": list(sections),
            },
        ],
    }


@pytest.fixture
def icon_item():
    return {"id": "1:1", "name": "Icon", "type": "INSTANCE"}


@pytest.fixture
def button_set():
    return {
        "id": "2:1",
        "name": "Button",
        "type": "COMPONENT_SET",
        "children": [
            {
                "id": "2:2",
                "name": "state=Hover",
                "type": "COMPONENT",
                "fills": [{"type": "SOLID"}],
                "children": [
                    {
                        "id": "2:3",
                        "name": "Label",
                        "type": "TEXT",
                        "style": {"fontSize": 14},
                        "absoluteBoundingBox": {"x": 0, "y": 0},
                    }
                ],
            }
        ],
    }


@pytest.fixture
def sample_document(icon_item, button_set):
    return make_document(
        {"id": "1:0", "name": "Icons", "type": "SECTION", "children": [icon_item]},
        {"id": "2:0", "name": "Buttons", "type": "SECTION", "children": [button_set]},
    )


@pytest.fixture
def document_factory():
    return make_document
