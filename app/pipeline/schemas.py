"""Structural contracts for the ``api_json`` and ``wfapi_describe`` sections.

Validation runs against the parsed payload as received, not the normalized
document, and reports only the first violation.
"""

from typing import Annotated, Any, Literal

from pydantic import (
    AfterValidator,
    AnyUrl,
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictInt,
    StrictStr,
    StringConstraints,
    TypeAdapter,
    ValidationError,
)
from pydantic_core import PydanticCustomError

from app.errors import SchemaViolation

BuildResult = Literal["SUCCESS", "FAILURE", "ABORTED", "UNSTABLE"]
RunStatus = Literal["SUCCESS", "FAILED", "ABORTED", "IN_PROGRESS", "NOT_EXECUTED"]

HREF_PATTERN = r"^(/[\w-]+)+$"

_url_adapter = TypeAdapter(AnyUrl)


def _check_url(value: str) -> str:
    try:
        _url_adapter.validate_python(value)
    except ValidationError:
        raise PydanticCustomError("url_format", "Input should be a valid URL")
    return value


def _check_number(value: Any) -> Any:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise PydanticCustomError("number_type", "Input should be a number")
    return value


UrlString = Annotated[StrictStr, AfterValidator(_check_url)]
Number = Annotated[Any, AfterValidator(_check_number)]
LinkPath = Annotated[StrictStr, StringConstraints(pattern=HREF_PATTERN)]


class Schema(BaseModel):
    model_config = ConfigDict(extra="allow")


# ---------------------------------------------------------------------------
# api_json
# ---------------------------------------------------------------------------


class ActionSchema(Schema):
    class_: StrictStr = Field(alias="_class")


class BuildReferenceSchema(Schema):
    number: StrictInt
    url: UrlString


class ApiJsonSchema(Schema):
    class_: StrictStr = Field(alias="_class")
    actions: list[ActionSchema]
    artifacts: list[Any]
    building: StrictBool
    description: StrictStr | None = None
    displayName: StrictStr
    duration: Number
    estimatedDuration: Number = 0
    executor: StrictStr | None = None
    fullDisplayName: StrictStr
    id: StrictStr
    keepLog: StrictBool
    number: Number
    queueId: Number
    result: BuildResult
    timestamp: Number
    url: UrlString
    changeSets: list[Any]
    culprits: list[Any]
    inProgress: StrictBool
    nextBuild: BuildReferenceSchema
    previousBuild: BuildReferenceSchema


# ---------------------------------------------------------------------------
# wfapi_describe
# ---------------------------------------------------------------------------


class SelfLinkSchema(Schema):
    href: LinkPath


class RunLinksSchema(Schema):
    self_: SelfLinkSchema = Field(alias="self")


class StageSchema(Schema):
    links: Annotated[dict[str, Any], Field(min_length=1)] = Field(alias="_links")
    id: StrictStr
    name: StrictStr
    execNode: StrictStr = ""
    status: RunStatus
    startTimeMillis: StrictInt
    durationMillis: StrictInt
    pauseDurationMillis: StrictInt = 0
    error: StrictStr = ""


class WorkflowDescribeSchema(Schema):
    links: RunLinksSchema = Field(alias="_links")
    id: StrictStr
    name: StrictStr
    status: RunStatus
    startTimeMillis: StrictInt
    endTimeMillis: StrictInt
    durationMillis: StrictInt
    queueDurationMillis: StrictInt
    pauseDurationMillis: StrictInt = 0
    stages: list[StageSchema]


class WebhookPayloadSchema(Schema):
    api_json: ApiJsonSchema
    wfapi_describe: WorkflowDescribeSchema


def _field_path(loc: tuple) -> str:
    return ".".join(str(part) for part in loc) or "payload"


def validate_payload(payload: dict[str, Any]) -> WebhookPayloadSchema:
    """Validate both sections, raising SchemaViolation for the first failure."""
    try:
        return WebhookPayloadSchema.model_validate(payload)
    except ValidationError as exc:
        first = exc.errors()[0]
        raise SchemaViolation(_field_path(first["loc"]), first["msg"])
