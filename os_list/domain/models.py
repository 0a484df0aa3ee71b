from enum import Enum
from typing import Optional, Tuple, Union
from pydantic import BaseModel, Field, ConfigDict, field_validator


class QueryParameters(BaseModel):
    """
    Search parameters for a single report invocation.
    """
    model_config = ConfigDict(frozen=True)

    owner: str = Field(..., min_length=1, description="User or organization login")
    topic: Optional[str] = Field(None, description="Only return repositories tagged with this topic")
    # GitHub caps search pages at 100, the API enforces it.
    count: int = Field(10, ge=1, description="Number of repositories to fetch")
    cursor: Optional[str] = Field(None, description="Edge cursor to resume after")

    @field_validator('owner')
    @classmethod
    def owner_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("owner must not be blank")
        return value


class Severity(str, Enum):
    CRITICAL = "CRITICAL"
    HIGH = "HIGH"
    MODERATE = "MODERATE"


class ColorClass(str, Enum):
    RED = "red"
    AMBER = "amber"
    GREEN = "green"
    BLUE = "blue"


class Advisory(BaseModel):
    model_config = ConfigDict(frozen=True)

    severity: str = ""
    summary: str = ""
    description: str = ""


class RepositoryRecord(BaseModel):
    """
    One repository from a search response, with every missing attribute
    replaced by its default.
    """
    model_config = ConfigDict(frozen=True)

    name: str = ""
    description: str = ""
    license: str = ""
    url: str = ""
    star_count: int = Field(0, ge=0)
    fork_count: int = Field(0, ge=0)
    open_issues: int = Field(0, ge=0)
    open_prs: int = Field(0, ge=0)
    has_code_of_conduct: bool = False
    has_custom_og_image: bool = False
    has_issue_templates: bool = False
    has_pr_templates: bool = False
    vulnerability_count: int = Field(0, ge=0)
    advisories: Tuple[Advisory, ...] = ()
    cursor: str = ""


class Span(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str
    color: Optional[ColorClass] = None


class Cell(BaseModel):
    """A table cell made of optionally colored text spans."""
    model_config = ConfigDict(frozen=True)

    spans: Tuple[Span, ...] = ()

    @classmethod
    def of(cls, value: Union[str, int], color: Optional[ColorClass] = None) -> "Cell":
        return cls(spans=(Span(text=str(value), color=color),))

    @property
    def plain(self) -> str:
        return "".join(span.text for span in self.spans)


class ReportRow(BaseModel):
    model_config = ConfigDict(frozen=True)

    cells: Tuple[Cell, ...]


class Projection(BaseModel):
    """Rows produced from a search response, plus the repository total it reported."""
    model_config = ConfigDict(frozen=True)

    total_count: int = 0
    rows: Tuple[ReportRow, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.total_count
