"""
AJAX call and response envelopes.

Both envelopes travel as JSON with camelCase keys; Python code uses the
snake_case attribute names.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

if TYPE_CHECKING:
    from pagewire.html.components import Component


class ReactionType(str, Enum):
    DIALOG_DISPLAY = "DialogDisplay"
    REDIRECT_URL = "RedirectUrl"
    REACTION_NOT_NEEDED = "ReactionNotNeeded"


class AjaxResponseType(str, Enum):
    SUCCESS = "Success"
    INFO = "Info"
    WARNING = "Warning"
    DANGER = "Danger"


class _Envelope(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class AjaxCall(_Envelope):
    """The request envelope naming the event class to fire."""

    class_name: str = ""
    component_id: str = ""
    event_type: str = ""
    event_id: str = ""
    value: Any = None
    parameters: dict[str, Any] = Field(default_factory=dict)
    headers: dict[str, str] = Field(default_factory=dict)
    page_call: bool = False

    def from_call(self, incoming: AjaxCall) -> AjaxCall:
        """Copy an incoming client payload into this request-scoped instance."""
        for name in type(self).model_fields:
            setattr(self, name, getattr(incoming, name))
        return self


class AjaxResponseReaction(_Envelope):
    reaction_title: str = ""
    reaction_message: str = ""
    reaction_type: ReactionType = ReactionType.DIALOG_DISPLAY
    response_type: AjaxResponseType = Field(default=AjaxResponseType.INFO, alias="type")


class AjaxComponentUpdate(_Envelope):
    id: str
    html: str
    type: str = "replace"


class AjaxResponse(_Envelope):
    """The response envelope written back for every AJAX call."""

    success: bool = True
    reactions: list[AjaxResponseReaction] = Field(default_factory=list)
    components: list[AjaxComponentUpdate] = Field(default_factory=list)
    local_storage: dict[str, str] = Field(default_factory=dict)
    session_storage: dict[str, str] = Field(default_factory=dict)

    def add_reaction(self, reaction: AjaxResponseReaction) -> AjaxResponse:
        self.reactions.append(reaction)
        return self

    def add_component(self, component: Component) -> AjaxResponse:
        """Send ``component``'s current HTML to replace its element on the client."""
        self.components.append(AjaxComponentUpdate(id=component.id, html=component.to_html()))
        return self

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)

    @classmethod
    def failure(
        cls, title: str, message: str, response_type: AjaxResponseType = AjaxResponseType.DANGER
    ) -> AjaxResponse:
        """A ``success=false`` response carrying one dialog reaction."""
        response = cls(success=False)
        response.add_reaction(
            AjaxResponseReaction(
                reaction_title=title,
                reaction_message=message,
                reaction_type=ReactionType.DIALOG_DISPLAY,
                response_type=response_type,
            )
        )
        return response
