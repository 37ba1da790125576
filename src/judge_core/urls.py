"""Helpers for Rails-style composite field names and the validation URL."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING
from urllib.parse import urlencode

if TYPE_CHECKING:
    from .ports.element import IElement

_BRACKETED = re.compile(r"\[(\w+)\]")
_TRAILING = re.compile(r"\[(\w+)\]$")
_LEADING = re.compile(r"^\w+")
_CAMEL = re.compile(r"(^[a-z]|_[a-z])")


def camelize(value: str) -> str:
    """``profile_attributes`` → ``ProfileAttributes``."""
    return _CAMEL.sub(lambda m: m.group(1).replace("_", "").upper(), value)


def attr_from_name(name: str) -> str:
    """``user[email]`` → ``email``."""
    match = _TRAILING.search(name)
    return match.group(1) if match else ""


def class_from_name(name: str) -> str:
    """``user[email]`` → ``user``; ``user[address][city]`` → ``Address``."""
    segments = _BRACKETED.findall(name)
    if not segments:
        return ""
    if len(segments) > 1:
        return camelize(segments[0])
    leading = _LEADING.match(name)
    return leading.group(0) if leading else ""


def url_for(element: IElement, kind: str, engine_path: str = "/judge") -> str:
    """Build the GET URL asking the server to check *element* for *kind*."""
    params = {
        "class": class_from_name(element.name),
        "attribute": attr_from_name(element.name),
        "value": element.value or "",
        "kind": kind,
    }
    return f"{engine_path.rstrip('/')}/validate?{urlencode(params)}"
