from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class PromptRequest(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    prompt: str = Field(min_length=1)
    reason: bool = False
    search: bool = False
    thread_id: Optional[str] = Field(default=None, alias="threadId")


class PromptResult(BaseModel):
    """Reply captured from the chat UI.

    ``thread_id`` is read back from the page URL after submission, so it can
    differ from the request's thread when a resume silently started a new one.
    ``response`` is None when no text was ever captured.
    """

    model_config = ConfigDict(populate_by_name=True)

    thread_id: Optional[str] = Field(default=None, alias="threadId")
    response: Optional[str] = None
