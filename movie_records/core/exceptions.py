from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional


class RecordsError(Exception):
    """Base exception for all movie_records errors"""
    pass


class ConfigError(RecordsError):
    """Invalid or unreadable global.json / environment settings"""
    pass


class TransportError(RecordsError):
    """
    The remote records API could not be reached or answered with something
    we cannot use (non-2xx status, undecodable body, wrong payload shape).
    """

    def __init__(self, operation: str, message: str, status_code: Optional[int] = None):
        self.operation = operation
        self.status_code = status_code
        super().__init__(f"{operation} failed: {message}")


@dataclass(frozen=True)
class ValidationIssue:
    code: str
    message: str


class ValidationError(RecordsError):
    """Input rejected locally, before any network call is made."""

    def __init__(self, issues: List[ValidationIssue]):
        self.issues = issues
        super().__init__("\n".join(f"{i.code}: {i.message}" for i in issues))
