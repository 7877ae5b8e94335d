from pydantic import BaseModel, Field


class CompletionRequest(BaseModel):
    # Presence is checked by the handler so it can answer with a 400
    message: str | None = Field(None, description="Prompt forwarded to the completion service")


class CompletionResult(BaseModel):
    response: str


class ConversionRequest(BaseModel):
    pdfData: str | None = Field(None, description="URL of the source PDF")


class ConversionResult(BaseModel):
    docxFileUrl: str


class ErrorResponse(BaseModel):
    error: str
