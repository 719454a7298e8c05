"""Tests for the AJAX call and response envelopes."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from pagewire.ajax import (
    AjaxCall,
    AjaxResponse,
    AjaxResponseReaction,
    AjaxResponseType,
    ReactionType,
)
from pagewire.html import Span


class TestAjaxCall:
    """Parsing of the client payload."""

    def test_parses_camel_case_payload(self) -> None:
        call = AjaxCall.model_validate_json(
            json.dumps(
                {
                    "className": "app_events_Save",
                    "componentId": "button_1",
                    "eventType": "click",
                    "eventId": "button_1_click",
                    "value": {"amount": 3},
                    "parameters": {"name": "Ada"},
                    "headers": {"userAgent": "pytest"},
                    "unexpected": True,
                }
            )
        )

        assert call.class_name == "app_events_Save"
        assert call.component_id == "button_1"
        assert call.value == {"amount": 3}
        assert call.parameters == {"name": "Ada"}
        assert call.page_call is False

    def test_from_call_copies_into_existing_instance(self) -> None:
        scoped = AjaxCall()
        incoming = AjaxCall(class_name="x", event_type="change", value="42")

        returned = scoped.from_call(incoming)

        assert returned is scoped
        assert scoped.class_name == "x"
        assert scoped.event_type == "change"
        assert scoped.value == "42"

    def test_rejects_wrong_types(self) -> None:
        with pytest.raises(ValidationError):
            AjaxCall.model_validate_json('{"parameters": "not-a-map"}')


class TestAjaxResponse:
    """Serialisation of the response envelope."""

    def test_default_response(self) -> None:
        payload = json.loads(AjaxResponse().to_json())

        assert payload == {
            "success": True,
            "reactions": [],
            "components": [],
            "localStorage": {},
            "sessionStorage": {},
        }

    def test_reactions_use_wire_names(self) -> None:
        response = AjaxResponse().add_reaction(
            AjaxResponseReaction(
                reaction_title="Saved",
                reaction_message="All good",
                reaction_type=ReactionType.REACTION_NOT_NEEDED,
                response_type=AjaxResponseType.SUCCESS,
            )
        )

        reaction = json.loads(response.to_json())["reactions"][0]

        assert reaction == {
            "reactionTitle": "Saved",
            "reactionMessage": "All good",
            "reactionType": "ReactionNotNeeded",
            "type": "Success",
        }

    def test_add_component_records_html(self) -> None:
        response = AjaxResponse().add_component(Span("updated", id="target"))

        assert json.loads(response.to_json())["components"] == [
            {"id": "target", "html": '<span id="target">updated</span>', "type": "replace"}
        ]

    def test_failure_builds_danger_dialog(self) -> None:
        response = AjaxResponse.failure("Oops", "Something broke")

        assert response.success is False
        assert response.reactions[0].reaction_type is ReactionType.DIALOG_DISPLAY
        assert response.reactions[0].response_type is AjaxResponseType.DANGER

    def test_storage_maps(self) -> None:
        response = AjaxResponse()
        response.local_storage["theme"] = "dark"

        assert json.loads(response.to_json())["localStorage"] == {"theme": "dark"}
