"""Requirement record types shared by the test suite."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class Page:
    action: Any = None


@dataclass
class PageReq:
    action: Any = None


@dataclass
class PagePerm:
    action: Any = None


@dataclass
class User:
    name: Any = None


@dataclass
class Document:
    action: Any = None
    owner: Any = None


@dataclass
class Empty:
    pass
