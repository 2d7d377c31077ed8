"""Canonical, fully-defaulted webhook document.

Field names serialize with Jenkins' camelCase spelling (``model_dump(by_alias=True)``).
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CanonicalModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class BuildReference(CanonicalModel):
    number: int | None = None
    url: str | None = None


class ApiJson(CanonicalModel):
    """Build metadata from Jenkins' ``/api/json``."""
    class_: str = Field("", alias="_class")
    actions: list[dict[str, Any]] = []
    artifacts: list[Any] = []
    building: bool = False
    description: str = ""
    display_name: str = ""
    duration: int | float = 0
    estimated_duration: int | float = 0
    executor: str = ""
    full_display_name: str = ""
    id: str = ""
    keep_log: bool = False
    number: int | float = 0
    queue_id: int | float = 0
    result: str = ""
    timestamp: int | float = 0
    url: str = ""
    change_sets: list[Any] = []
    culprits: list[Any] = []
    in_progress: bool = False
    next_build: BuildReference = Field(default_factory=BuildReference)
    previous_build: BuildReference = Field(default_factory=BuildReference)
    timing: dict[str, Any] = {}


class Href(CanonicalModel):
    href: str = ""


class WorkflowLinks(CanonicalModel):
    self_: Href = Field(default_factory=Href, alias="self")


class Stage(CanonicalModel):
    links: dict[str, Any] = Field(default_factory=dict, alias="_links")
    id: str = ""
    name: str = ""
    exec_node: str = ""
    status: str = ""
    start_time_millis: int = 0
    duration_millis: int = 0
    pause_duration_millis: int = 0
    error: str = ""


class WorkflowDescribe(CanonicalModel):
    """Pipeline run metadata from Jenkins' ``/wfapi/describe``."""
    links: WorkflowLinks = Field(default_factory=WorkflowLinks, alias="_links")
    id: str = ""
    name: str = ""
    status: str = ""
    start_time_millis: int = 0
    end_time_millis: int = 0
    duration_millis: int = 0
    queue_duration_millis: int = 0
    pause_duration_millis: int = 0
    stages: list[Stage] = []


class CanonicalDocument(CanonicalModel):
    api_json: ApiJson = Field(default_factory=ApiJson, alias="api_json")
    wfapi_describe: WorkflowDescribe = Field(default_factory=WorkflowDescribe, alias="wfapi_describe")
