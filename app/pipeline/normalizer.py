"""Map an arbitrary parsed payload onto the canonical document.

Normalization is total: absent, null or wrongly-typed values fall back to the
field's default and nothing here raises.
"""

from typing import Any

from app.pipeline.canonical import (
    ApiJson,
    BuildReference,
    CanonicalDocument,
    Href,
    Stage,
    WorkflowDescribe,
    WorkflowLinks,
)

TIME_IN_QUEUE_ACTION = "jenkins.metrics.impl.TimeInQueueAction"


def _str(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _bool(value: Any) -> bool:
    return value if isinstance(value, bool) else False


def _number(value: Any) -> int | float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0
    return value


def _int(value: Any) -> int:
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return 0


def _list(value: Any) -> list:
    return list(value) if isinstance(value, list) else []


def _dict(value: Any) -> dict:
    return dict(value) if isinstance(value, dict) else {}


def _optional_int(value: Any) -> int | None:
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


def _optional_str(value: Any) -> str | None:
    return value if isinstance(value, str) else None


def extract_timing(actions: Any) -> dict[str, Any]:
    """First TimeInQueueAction entry of ``actions``, or an empty dict."""
    for action in _list(actions):
        if isinstance(action, dict) and action.get("_class") == TIME_IN_QUEUE_ACTION:
            return dict(action)
    return {}


def _build_reference(value: Any) -> BuildReference:
    ref = _dict(value)
    return BuildReference(number=_optional_int(ref.get("number")), url=_optional_str(ref.get("url")))


def normalize_api_json(raw: Any) -> ApiJson:
    data = _dict(raw)
    return ApiJson(
        class_=_str(data.get("_class")),
        actions=[a for a in _list(data.get("actions")) if isinstance(a, dict)],
        artifacts=_list(data.get("artifacts")),
        building=_bool(data.get("building")),
        description=_str(data.get("description")),
        display_name=_str(data.get("displayName")),
        duration=_number(data.get("duration")),
        estimated_duration=_number(data.get("estimatedDuration")),
        executor=_str(data.get("executor")),
        full_display_name=_str(data.get("fullDisplayName")),
        id=_str(data.get("id")),
        keep_log=_bool(data.get("keepLog")),
        number=_number(data.get("number")),
        queue_id=_number(data.get("queueId")),
        result=_str(data.get("result")),
        timestamp=_number(data.get("timestamp")),
        url=_str(data.get("url")),
        change_sets=_list(data.get("changeSets")),
        culprits=_list(data.get("culprits")),
        in_progress=_bool(data.get("inProgress")),
        next_build=_build_reference(data.get("nextBuild")),
        previous_build=_build_reference(data.get("previousBuild")),
        timing=extract_timing(data.get("actions")),
    )


def _stage_error(value: Any) -> str:
    # wfapi reports failures either as a string or as {"message": ..., "type": ...}
    if isinstance(value, dict):
        return _str(value.get("message"))
    return _str(value)


def normalize_stage(raw: Any) -> Stage:
    data = _dict(raw)
    return Stage(
        links=_dict(data.get("_links")),
        id=_str(data.get("id")),
        name=_str(data.get("name")),
        exec_node=_str(data.get("execNode")),
        status=_str(data.get("status")),
        start_time_millis=_int(data.get("startTimeMillis")),
        duration_millis=_int(data.get("durationMillis")),
        pause_duration_millis=_int(data.get("pauseDurationMillis")),
        error=_stage_error(data.get("error")),
    )


def normalize_workflow(raw: Any) -> WorkflowDescribe:
    data = _dict(raw)
    self_link = _dict(_dict(data.get("_links")).get("self"))
    return WorkflowDescribe(
        links=WorkflowLinks(self_=Href(href=_str(self_link.get("href")))),
        id=_str(data.get("id")),
        name=_str(data.get("name")),
        status=_str(data.get("status")),
        start_time_millis=_int(data.get("startTimeMillis")),
        end_time_millis=_int(data.get("endTimeMillis")),
        duration_millis=_int(data.get("durationMillis")),
        queue_duration_millis=_int(data.get("queueDurationMillis")),
        pause_duration_millis=_int(data.get("pauseDurationMillis")),
        stages=[normalize_stage(s) for s in _list(data.get("stages"))],
    )


def normalize(payload: Any) -> CanonicalDocument:
    data = _dict(payload)
    return CanonicalDocument(
        api_json=normalize_api_json(data.get("api_json")),
        wfapi_describe=normalize_workflow(data.get("wfapi_describe")),
    )
