import logging
from typing import Annotated

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse, PlainTextResponse

from .schemas import (
    CompletionRequest,
    CompletionResult,
    ConversionRequest,
    ConversionResult,
    ErrorResponse,
)
from .dependencies import get_completion_client, get_conversion_client
from src.clients.completion import CompletionClient
from src.clients.conversion import ConversionClient
from src.core.constants import ErrorMessages
from src.core.exceptions import EmptyConversionError, UpstreamError, ValidationError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Proxy"])

# Routes whose error bodies are plain text rather than ErrorResponse JSON
PLAIN_TEXT_ERROR_PATHS = {"/chatgpt"}


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(),
    )


@router.post(
    "/chatgpt",
    response_model=CompletionResult,
    responses={
        400: {"description": "Missing message (plain text)"},
        500: {"description": "Completion service failure (plain text)"},
    },
)
async def chatgpt(
    client: Annotated[CompletionClient, Depends(get_completion_client)],
    payload: CompletionRequest | None = None,
):
    """
    Forward a prompt to the completion service and relay the generated text.
    """
    try:
        if payload is None or not payload.message:
            raise ValidationError("message is required")

        text = await client.complete(payload.message)
        return CompletionResult(response=text)

    except ValidationError as exc:
        logger.warning("Rejected completion request: %s", exc)
        return PlainTextResponse(
            ErrorMessages.MISSING_MESSAGE,
            status_code=status.HTTP_400_BAD_REQUEST,
        )
    except UpstreamError:
        logger.exception("Completion request failed | prompt_chars=%d",
                         len(payload.message))
        return PlainTextResponse(
            ErrorMessages.COMPLETION_FAILED,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )


@router.post(
    "/convertPdfToDocx",
    response_model=ConversionResult,
    responses={
        400: {"model": ErrorResponse, "description": "Missing pdfData"},
        500: {"model": ErrorResponse, "description": "Conversion service failure"},
    },
)
async def convert_pdf_to_docx(
    client: Annotated[ConversionClient, Depends(get_conversion_client)],
    payload: ConversionRequest | None = None,
):
    """
    Forward a PDF URL to the conversion service and relay the DOCX URL.
    """
    pdf_url = payload.pdfData if payload is not None else None
    try:
        if not pdf_url:
            raise ValidationError("pdfData is required")

        docx_url = await client.convert_pdf_to_docx(pdf_url)
        return ConversionResult(docxFileUrl=docx_url)

    except ValidationError as exc:
        logger.warning("Rejected conversion request: %s", exc)
        return _error(status.HTTP_400_BAD_REQUEST, ErrorMessages.MISSING_PDF)
    except EmptyConversionError:
        logger.error("PDF->DOCX conversion returned no file | source=%s", pdf_url)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR,
                      ErrorMessages.CONVERSION_EMPTY)
    except UpstreamError:
        logger.exception("PDF->DOCX conversion failed | source=%s", pdf_url)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR,
                      ErrorMessages.CONVERSION_FAILED)
