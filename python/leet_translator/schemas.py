from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field

# -------------------------------------------------------------------------
# [Client <-> Service Schemas]
# -------------------------------------------------------------------------

class TranslateMode(str, Enum):
    """Translation direction for the bidirectional endpoint"""
    TO_LEET = "toLeet"
    FROM_LEET = "fromLeet"

class TranslateRequest(BaseModel):
    """Validated inbound request"""
    text: str
    mode: TranslateMode = TranslateMode.FROM_LEET

class TranslationResponse(BaseModel):
    translation: str

class ErrorResponse(BaseModel):
    error: str

# -------------------------------------------------------------------------
# [Gemini generateContent Schemas]
# -------------------------------------------------------------------------

class Part(BaseModel):
    model_config = ConfigDict(extra="ignore")
    text: Optional[str] = None

class Content(BaseModel):
    model_config = ConfigDict(extra="ignore")
    parts: Optional[List[Part]] = None

class SafetySetting(BaseModel):
    category: str
    threshold: str = "BLOCK_MEDIUM_AND_ABOVE"

class GeminiRequest(BaseModel):
    """Request body for models/{model}:generateContent"""
    model_config = ConfigDict(populate_by_name=True)

    contents: List[Content]
    safety_settings: List[SafetySetting] = Field(default_factory=list, alias="safetySettings")

# Every level is optional: a missing link means "no translation", not an error.
class Candidate(BaseModel):
    model_config = ConfigDict(extra="ignore")
    content: Optional[Content] = None
    finish_reason: Optional[str] = Field(default=None, alias="finishReason")

class PromptFeedback(BaseModel):
    model_config = ConfigDict(extra="ignore")
    block_reason: Optional[str] = Field(default=None, alias="blockReason")

class GeminiResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    candidates: Optional[List[Candidate]] = None
    prompt_feedback: Optional[PromptFeedback] = Field(default=None, alias="promptFeedback")

    def first_text(self) -> Optional[str]:
        """candidates[0].content.parts[0].text, or None if any link is absent"""
        if not self.candidates:
            return None
        content = self.candidates[0].content
        if content is None or not content.parts:
            return None
        return content.parts[0].text
