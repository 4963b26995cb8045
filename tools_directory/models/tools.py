"""Tool record and tool API request/response models."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

# ============ TOOL RECORD ============


class Tool(BaseModel):
    """A single entry in the tools directory."""

    model_config = ConfigDict(extra="ignore", validate_assignment=True)

    id: str = Field(..., description="Stable identifier, never reused")
    name: str = Field(..., description="Display name")
    description: str = Field(..., description="Short description")
    url: str = Field(..., description="Link to the tool")
    order: int = Field(..., description="1-based display position")

    @field_validator("id", mode="before")
    @classmethod
    def _id_as_string(cls, value):
        # Hand-edited data may carry numeric ids
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value


# ============ REQUEST MODELS ============


class ToolCreateRequest(BaseModel):
    """Body of POST /api/tools.

    Fields are optional at the schema level so that a missing field is
    reported with the same flat message as an empty one.
    """

    name: str | None = Field(default=None, description="Display name")
    description: str | None = Field(default=None, description="Short description")
    url: str | None = Field(default=None, description="Link to the tool")


class ToolUpdateRequest(BaseModel):
    """Body of PUT /api/tools. Only provided fields are changed."""

    id: str | None = Field(default=None, description="Tool to update")
    name: str | None = Field(default=None, description="New display name")
    description: str | None = Field(default=None, description="New description")
    url: str | None = Field(default=None, description="New link")
    order: int | None = Field(default=None, description="New 1-based position")


# ============ RESPONSE MODELS ============


class SuccessResponse(BaseModel):
    """Generic acknowledgement."""

    success: bool = Field(default=True)


class ErrorResponse(BaseModel):
    """Error body returned by every failing endpoint."""

    success: bool = Field(default=False)
    error: str = Field(..., description="Human-readable error message")
