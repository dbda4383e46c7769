"""Frame models sent to the display client."""

from pydantic import Field

from rcframes.models.base import BaseSchema


class GoalData(BaseSchema):
    """Progress of a metric towards a caller-supplied target."""

    start: int | float = 0
    current: int | float
    end: int | float
    unit: str = ""


class TextFrame(BaseSchema):
    """A single line of text with an icon."""

    text: str
    icon: str


class GoalFrame(BaseSchema):
    """A goal-progress frame."""

    icon: str
    goal_data: GoalData


Frame = TextFrame | GoalFrame


class FramesResponse(BaseSchema):
    """Success envelope."""

    frames: list[Frame] = Field(default_factory=list)


class ErrorResponse(BaseSchema):
    """Error envelope: one error text frame plus the bare message."""

    frames: list[TextFrame]
    error: str


class PrivacyPolicy(BaseSchema):
    """Static privacy policy document."""

    effective_date: str
    policy: str

    def to_json_dict(self) -> dict:
        # The policy document keeps snake_case keys
        return self.model_dump(mode="json")
