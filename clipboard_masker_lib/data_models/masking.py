"""
Request/response models shared by the REST API, the client and the session.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field


class MaskingResult(BaseModel):
    """
    Outcome of a single transform.

    ``changed`` is always ``output != input``; an integration must treat
    ``changed == False`` as a no‑op and never re‑emit identical content.
    """

    model_config = ConfigDict(frozen=True)

    input: str
    output: str

    @computed_field
    @property
    def changed(self) -> bool:
        return self.output != self.input


class TransformTextModel(BaseModel):
    text: str


class CleanLinkModel(BaseModel):
    url: str
    hop_limit: Optional[int] = None


class CustomNameModel(BaseModel):
    name: str = Field(min_length=1)


class CustomPatternModel(BaseModel):
    """Payload used to create or replace a custom pattern."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(min_length=1)
    pattern: str = Field(min_length=1)
    replacement: str = Field(min_length=1)
    is_enabled: bool = Field(default=True, alias="isEnabled")
