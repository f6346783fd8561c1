"""PMO: List query descriptor and its validator.

Every listing endpoint binds the raw query string through parse_query().
Paging and sorting keys are coerced here; resource filters are validated by
the resource's filters model. Field errors are collected and raised together
as one ValidationError.
"""
import re
from collections.abc import Mapping
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from pmo.core.exceptions import ValidationError

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 20
MAX_LIMIT = 100
DEFAULT_SORT = "created_at"

_INT_RE = re.compile(r"^-?\d+$", re.ASCII)


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


class QueryDescriptor(BaseModel):
    """Validated paging, sorting and filter values for one list request."""

    model_config = ConfigDict(frozen=True)

    page: int = Field(DEFAULT_PAGE, ge=1)
    limit: int = Field(DEFAULT_LIMIT, ge=1, le=MAX_LIMIT)
    sort: str = DEFAULT_SORT
    order: SortOrder = SortOrder.DESC
    filters: dict[str, Any] = Field(default_factory=dict)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


def _is_present(value: Any) -> bool:
    return value is not None and str(value).strip() != ""


def _coerce_int(field: str, value: Any, minimum: int, maximum: int | None = None) -> int:
    """Parse a query-string integer and enforce its bounds."""
    text = str(value).strip()
    if not _INT_RE.match(text):
        raise ValidationError.for_field(field, f"{field} must be an integer, got {value!r}")
    try:
        number = int(text)
    except ValueError:
        # digit strings beyond the interpreter's int conversion limit
        raise ValidationError.for_field(field, f"{field} is out of range")
    if number < minimum:
        raise ValidationError.for_field(field, f"{field} must be at least {minimum}")
    if maximum is not None and number > maximum:
        raise ValidationError.for_field(field, f"{field} exceeds maximum {maximum}")
    return number


def _coerce_order(value: Any) -> SortOrder:
    text = str(value).strip().lower()
    try:
        return SortOrder(text)
    except ValueError:
        raise ValidationError.for_field("order", f"order must be one of asc, desc, got {value!r}")


def _validate_filters(raw: Mapping[str, Any], filters_model: type[BaseModel]) -> tuple[dict, dict[str, str]]:
    candidate = {
        name: value
        for name, value in raw.items()
        if name in filters_model.model_fields and _is_present(value)
    }
    try:
        parsed = filters_model.model_validate(candidate)
    except PydanticValidationError as exc:
        errors: dict[str, str] = {}
        for err in exc.errors():
            field = str(err["loc"][0]) if err["loc"] else "filters"
            errors.setdefault(field, f"{field}: {err['msg']}")
        return {}, errors
    return parsed.model_dump(exclude_none=True), {}


def parse_query(
    raw: Mapping[str, Any],
    filters_model: type[BaseModel] | None = None,
) -> QueryDescriptor:
    """
    Turn raw query-string values into a QueryDescriptor.
    Absent or empty keys take their defaults; unknown keys are ignored.
    Raises ValidationError naming every offending field.
    """
    field_errors: dict[str, str] = {}
    values: dict[str, Any] = {}

    for name, maximum in (("page", None), ("limit", MAX_LIMIT)):
        if _is_present(raw.get(name)):
            try:
                values[name] = _coerce_int(name, raw[name], 1, maximum)
            except ValidationError as e:
                field_errors.update(e.field_errors)

    if _is_present(raw.get("sort")):
        values["sort"] = str(raw["sort"]).strip()

    if _is_present(raw.get("order")):
        try:
            values["order"] = _coerce_order(raw["order"])
        except ValidationError as e:
            field_errors.update(e.field_errors)

    if filters_model is not None:
        filters, filter_errors = _validate_filters(raw, filters_model)
        field_errors.update(filter_errors)
        values["filters"] = filters

    if field_errors:
        raise ValidationError.from_field_errors(field_errors)

    return QueryDescriptor(**values)
