"""
Tests for structural validation of api_json and wfapi_describe.

Covers:
- Acceptance of a well-formed payload
- Enumerations (build result, run/stage status)
- URL and link-path formats
- Required fields, nullable fields and first-violation reporting
"""

import pytest

from app.errors import SchemaViolation
from app.pipeline import validate_payload


def _violation(payload) -> SchemaViolation:
    with pytest.raises(SchemaViolation) as exc:
        validate_payload(payload)
    return exc.value


class TestWellFormed:

    def test_sample_payload_accepted(self, payload):
        validate_payload(payload)

    def test_extra_keys_allowed(self, payload):
        payload["api_json"]["queueTimeMillis"] = 12
        payload["wfapi_describe"]["stages"][0]["parentNodes"] = ["3"]
        payload["extra"] = True
        validate_payload(payload)

    def test_empty_stage_list_accepted(self, payload):
        payload["wfapi_describe"]["stages"] = []
        validate_payload(payload)


class TestApiJson:

    @pytest.mark.parametrize("result", ["SUCCESS", "FAILURE", "ABORTED", "UNSTABLE"])
    def test_allowed_results(self, payload, result):
        payload["api_json"]["result"] = result
        validate_payload(payload)

    def test_running_result_rejected(self, payload):
        payload["api_json"]["result"] = "RUNNING"
        err = _violation(payload)
        assert err.field == "api_json.result"
        assert "SUCCESS" in err.constraint
        assert err.detail.startswith("Schema violation at api_json.result:")

    def test_null_result_rejected(self, payload):
        payload["api_json"]["result"] = None
        assert _violation(payload).field == "api_json.result"

    def test_invalid_url_rejected(self, payload):
        payload["api_json"]["url"] = "not a url"
        err = _violation(payload)
        assert err.field == "api_json.url"
        assert err.constraint == "Input should be a valid URL"

    @pytest.mark.parametrize("field", ["building", "keepLog", "inProgress"])
    def test_booleans_are_strict(self, payload, field):
        payload["api_json"][field] = "false"
        assert _violation(payload).field == f"api_json.{field}"

    @pytest.mark.parametrize("field", ["duration", "timestamp", "queueId", "number"])
    def test_numbers_required(self, payload, field):
        payload["api_json"][field] = "10"
        err = _violation(payload)
        assert err.field == f"api_json.{field}"
        assert err.constraint == "Input should be a number"

    def test_float_duration_accepted(self, payload):
        payload["api_json"]["duration"] = 45210.5
        validate_payload(payload)

    @pytest.mark.parametrize("field", ["displayName", "fullDisplayName", "id", "artifacts", "changeSets", "culprits"])
    def test_required_fields(self, payload, field):
        del payload["api_json"][field]
        err = _violation(payload)
        assert err.field == f"api_json.{field}"
        assert err.constraint == "Field required"

    @pytest.mark.parametrize("field", ["description", "executor"])
    def test_nullable_strings(self, payload, field):
        payload["api_json"][field] = None
        validate_payload(payload)
        payload["api_json"][field] = "text"
        validate_payload(payload)
        payload["api_json"][field] = 1
        assert _violation(payload).field == f"api_json.{field}"

    def test_action_requires_class(self, payload):
        payload["api_json"]["actions"].append({"causes": []})
        assert _violation(payload).field == "api_json.actions.2._class"

    def test_missing_next_build_rejected(self, payload):
        del payload["api_json"]["nextBuild"]
        assert _violation(payload).field == "api_json.nextBuild"

    def test_build_reference_number_must_be_integer(self, payload):
        payload["api_json"]["previousBuild"]["number"] = 1.5
        assert _violation(payload).field == "api_json.previousBuild.number"

    def test_build_reference_url_format(self, payload):
        payload["api_json"]["nextBuild"]["url"] = "job/my-job/124"
        assert _violation(payload).field == "api_json.nextBuild.url"


class TestWorkflowDescribe:

    def test_good_href_accepted(self, payload):
        payload["wfapi_describe"]["_links"]["self"]["href"] = "/job/my-job/123"
        validate_payload(payload)

    @pytest.mark.parametrize("href", ["bad path", "/job/my job/1", "job/my-job", "/", "/job//1", "/job/x/"])
    def test_bad_href_rejected(self, payload, href):
        payload["wfapi_describe"]["_links"]["self"]["href"] = href
        err = _violation(payload)
        assert err.field == "wfapi_describe._links.self.href"

    @pytest.mark.parametrize("status", ["SUCCESS", "FAILED", "ABORTED", "IN_PROGRESS", "NOT_EXECUTED"])
    def test_allowed_statuses(self, payload, status):
        payload["wfapi_describe"]["status"] = status
        payload["wfapi_describe"]["stages"][0]["status"] = status
        validate_payload(payload)

    def test_unknown_status_rejected(self, payload):
        payload["wfapi_describe"]["status"] = "FAILURE"
        assert _violation(payload).field == "wfapi_describe.status"

    @pytest.mark.parametrize("field", ["startTimeMillis", "endTimeMillis", "durationMillis", "queueDurationMillis"])
    def test_millis_required_integers(self, payload, field):
        payload["wfapi_describe"][field] = 1.5
        assert _violation(payload).field == f"wfapi_describe.{field}"
        del payload["wfapi_describe"][field]
        assert _violation(payload).constraint == "Field required"

    def test_stages_required(self, payload):
        del payload["wfapi_describe"]["stages"]
        assert _violation(payload).field == "wfapi_describe.stages"

    def test_stage_links_must_not_be_empty(self, payload):
        payload["wfapi_describe"]["stages"][1]["_links"] = {}
        assert _violation(payload).field == "wfapi_describe.stages.1._links"

    def test_stage_optional_fields(self, payload):
        stage = payload["wfapi_describe"]["stages"][0]
        del stage["execNode"]
        del stage["pauseDurationMillis"]
        stage["error"] = "script returned exit code 1"
        validate_payload(payload)

    def test_stage_status_enum(self, payload):
        payload["wfapi_describe"]["stages"][0]["status"] = "UNSTABLE"
        assert _violation(payload).field == "wfapi_describe.stages.0.status"


class TestSections:

    @pytest.mark.parametrize("section", ["api_json", "wfapi_describe"])
    def test_missing_section(self, payload, section):
        del payload[section]
        err = _violation(payload)
        assert err.field == section
        assert err.constraint == "Field required"

    def test_non_object_section(self, payload):
        payload["wfapi_describe"] = []
        assert _violation(payload).field == "wfapi_describe"

    def test_empty_payload_reports_api_json_first(self):
        assert _violation({}).field == "api_json"

    def test_only_first_violation_reported(self, payload):
        payload["api_json"]["result"] = "RUNNING"
        payload["wfapi_describe"]["status"] = "RUNNING"
        err = _violation(payload)
        assert err.field == "api_json.result"
        assert "wfapi_describe" not in err.detail
