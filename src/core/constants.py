from enum import Enum


class CompletionModels(Enum):
    """Supported completion model identifiers"""

    TEXT_DAVINCI_003 = "text-davinci-003"
    GPT_35_TURBO_INSTRUCT = "gpt-3.5-turbo-instruct"
    DAVINCI_002 = "davinci-002"


class AppSettings:
    """Central place for all application-level configuration"""

    COMPLETION_MODEL: CompletionModels = CompletionModels.TEXT_DAVINCI_003
    COMPLETION_MAX_TOKENS: int = 150
    OPENAI_BASE_URL: str = "https://api.openai.com/v1"
    CONVERTAPI_BASE_URL: str = "https://v2.convertapi.com"
    UPSTREAM_TIMEOUT: float = 30.0
    HOST: str = "0.0.0.0"
    PORT: int = 3000


class ErrorMessages:
    """Fixed messages returned to callers"""

    MISSING_MESSAGE = "Invalid request. A message is required."
    COMPLETION_FAILED = "Error while communicating with ChatGPT."
    MISSING_PDF = "Invalid request. The PDF file is required."
    CONVERSION_EMPTY = "Error during PDF->DOCX conversion."
    CONVERSION_FAILED = "An error occurred during the conversion."
    INVALID_BODY = "Invalid request body."
    INTERNAL = "Internal server error"
