from pydantic import BaseModel, Field

from interview_board.infrastructure.llm.providers import ModelProvider, ModelSelector


class InterviewParseRequest(BaseModel):
    """Free-text interview parse request"""

    text: str = Field(..., description="Pasted interview text")
    provider: ModelProvider = Field(ModelProvider.DEEPSEEK, description="Model provider")
    apiKey: str | None = Field(None, description="Provider API key (server key used when omitted)")
    modelId: str | None = Field(None, description="Provider model id (required for doubao)")

    def to_selector(self) -> ModelSelector:
        return ModelSelector(provider=self.provider, api_key=self.apiKey, model_id=self.modelId)

    class Config:
        json_schema_extra = {
            "example": {
                "text": "Tencent full-stack interview on 2025-03-11 at 14:00, 1.5h, Nanshan office",
                "provider": "deepseek",
                "apiKey": "sk-...",
                "modelId": None,
            }
        }


class InterviewParseResponse(BaseModel):
    """Extracted form field patch"""

    data: dict[str, str] = Field(..., description="Extracted form fields")

    class Config:
        json_schema_extra = {
            "example": {
                "data": {
                    "companyName": "Tencent",
                    "position": "Full-stack Engineer",
                    "date": "2025-03-11",
                    "startTime": "14:00",
                    "duration": "1.5h",
                    "location": "Nanshan office",
                    "notes": "",
                    "status": "Scheduled",
                    "color": "#3b82f6",
                }
            }
        }
