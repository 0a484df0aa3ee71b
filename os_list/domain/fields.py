"""
Field catalogs for the report tables.

Each column is identified by a canonical key: the display label lowercased
with all whitespace removed. Users pick details columns with
``--fields=name,url`` using any casing or spacing of the labels.
"""
import re
from enum import Enum
from typing import Iterable, Optional, Tuple

from os_list.domain.exceptions import UnknownFieldException

_WHITESPACE = re.compile(r"\s+")


def normalize(raw_field: str) -> str:
    """Lowercases a field name and strips all whitespace from it."""
    return _WHITESPACE.sub("", raw_field).lower()


class CatalogField(Enum):
    """Base for ordered column catalogs. Member values are ``(label, width)``."""

    def __init__(self, label: str, width: int):
        self.label = label
        self.width = width

    @property
    def key(self) -> str:
        return normalize(self.label)

    @classmethod
    def labels(cls) -> Tuple[str, ...]:
        return tuple(field.label for field in cls)


class DetailField(CatalogField):
    NAME = ("Name", 30)
    DESCRIPTION = ("Description", 70)
    LICENSE = ("License", 15)
    URL = ("URL", 60)
    STAR_COUNT = ("Star Count", 10)
    FORK_COUNT = ("Fork count", 10)
    OPEN_ISSUES = ("Open Issues", 11)
    OPEN_PRS = ("Open PRs", 8)
    HAS_CODE_OF_CONDUCT = ("Code of Conduct", 15)
    HAS_CUSTOM_OG_IMAGE = ("Custom OG Image", 15)
    HAS_ISSUE_TEMPLATES = ("Has Issue Templates", 15)
    HAS_PR_TEMPLATES = ("Has PR Templates", 15)
    VULNERABILITIES = ("Vulnerabilities", 15)
    CURSOR_ID = ("Cursor ID", 12)


class VulnerabilityField(CatalogField):
    NAME = ("Name", 20)
    URL = ("URL", 20)
    VULNERABILITIES = ("Vulnerabilities", 15)
    INFO = ("Info", 60)
    CURSOR_ID = ("Cursor ID", 12)


_DETAILS_BY_KEY = {field.key: field for field in DetailField}


def parse_field_option(option: Optional[str]) -> Tuple[str, ...]:
    """Splits a comma separated ``--fields`` value. Empty input selects nothing."""
    if not option:
        return ()
    return tuple(option.split(","))


def resolve(selected_raw: Optional[Iterable[str]]) -> Tuple[DetailField, ...]:
    """
    Resolves raw field names to catalog columns, keeping the caller's order.

    Duplicates are kept, so a field listed twice is shown twice. When nothing
    is selected every column is returned in catalog order.

    Raises:
        UnknownFieldException: On the first name that is not in the catalog.
    """
    selected_raw = list(selected_raw or ())
    if not selected_raw:
        return tuple(DetailField)

    resolved = []
    for raw_field in selected_raw:
        field = _DETAILS_BY_KEY.get(normalize(raw_field))
        if field is None:
            raise UnknownFieldException(raw_field, DetailField.labels())
        resolved.append(field)

    return tuple(resolved)
