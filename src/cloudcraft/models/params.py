"""Query parameters for snapshots and exports.

Only fields with a non-default value are sent: empty strings, False, 0 and
empty lists are left out so the API applies its own defaults.
"""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_SNAPSHOT_FORMAT = "png"
DEFAULT_IMAGE_FORMAT = "png"
DEFAULT_BUDGET_FORMAT = "csv"

DEFAULT_WIDTH = 1920
DEFAULT_HEIGHT = 1080

DEFAULT_CURRENCY = "USD"
DEFAULT_PERIOD = "m"


def _format_number(value: int | float) -> str:
    """Shortest exact string for a number, e.g. 2.0 -> "2" and 1.5 -> "1.5"."""
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if isinstance(value, int):
        return str(value)
    # Shortest round-trip digits, written without an exponent
    return format(Decimal(repr(value)), "f")


class _QueryParams(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def to_query(self) -> dict[str, str]:
        """Encode non-default fields as query string values keyed by API name."""
        query: dict[str, str] = {}
        for name, field in type(self).model_fields.items():
            key = field.alias or name
            match getattr(self, name):
                case bool() as flag:
                    if flag:
                        query[key] = "true"
                case int() | float() as number:
                    if number:
                        query[key] = _format_number(number)
                case list() as items:
                    if items:
                        query[key] = ",".join(items)
                case str() as text:
                    if text:
                        query[key] = text
        return query


class ImageExportParams(_QueryParams):
    """Options for rendering a blueprint as an image."""

    paper_size: str = Field(default="", alias="paperSize")
    grid: bool = False
    transparent: bool = False
    landscape: bool = False
    scale: float = 0
    width: int = 0
    height: int = 0

    @classmethod
    def default(cls) -> "ImageExportParams":
        return cls(width=DEFAULT_WIDTH, height=DEFAULT_HEIGHT)


class SnapshotParams(ImageExportParams):
    """Options for scanning and rendering a region of a cloud account."""

    projection: str = ""
    theme: str = ""
    filter: list[str] = Field(default_factory=list)
    exclude: list[str] = Field(default_factory=list)
    label: bool = False
    autoconnect: bool = False

    @classmethod
    def default(cls) -> "SnapshotParams":
        return cls(width=DEFAULT_WIDTH, height=DEFAULT_HEIGHT)


class BudgetExportParams(_QueryParams):
    """Options for exporting the budget of a blueprint."""

    currency: str = ""
    period: str = ""
    rate: str = ""

    @classmethod
    def default(cls) -> "BudgetExportParams":
        return cls(currency=DEFAULT_CURRENCY, period=DEFAULT_PERIOD)
