#!/usr/bin/env python3
"""
组件名称转换工具模块

将 Figma 中的自由格式名称转换为 PascalCase / camelCase 标识符。
只把 ASCII 字母和数字视为单词字符。
"""

import re

_WORD_SEPARATOR = re.compile(r"[^a-zA-Z0-9]+")


def _capitalize_ascii(word: str) -> str:
    # str.capitalize 会处理非 ASCII 字符，这里只需要 ASCII
    return word[:1].upper() + word[1:].lower()


def to_pascal_case(name: str) -> str:
    """
    转换为 PascalCase

    例如 "hello_world" -> "HelloWorld"，全符号或空字符串返回 ""。
    """
    return "".join(
        _capitalize_ascii(word) for word in _WORD_SEPARATOR.split(name) if word
    )


def to_camel_case(name: str) -> str:
    """转换为 camelCase，例如 "Hello World" -> "helloWorld" """
    pascal = to_pascal_case(name)
    return pascal[:1].lower() + pascal[1:]


def normalize_name(name: str) -> str:
    """用于比较的规范化名称"""
    return to_pascal_case(name).lower()


def are_same_component(name1: str, name2: str) -> bool:
    """两个原始名称规范化后相同即视为同一组件"""
    return normalize_name(name1) == normalize_name(name2)
