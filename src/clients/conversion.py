from __future__ import annotations

from enum import Enum
from typing import Any, List, Optional

import httpx
from pydantic import BaseModel, ValidationError

from src.core.constants import AppSettings
from src.core.exceptions import EmptyConversionError, UpstreamError


class Endpoint(Enum):
    """Conversion API endpoint paths"""

    PDF_TO_DOCX = "/convert/pdf/to/docx"


class ConvertedFile(BaseModel):
    """Output file descriptor returned by the conversion service"""

    Url: Optional[str] = None
    FileName: Optional[str] = None
    FileSize: Optional[int] = None


class ConversionPayload(BaseModel):
    Files: Optional[List[ConvertedFile]] = None


class ConversionClient:
    """Async client for a document conversion API"""

    def __init__(
        self,
        secret: str,
        base_url: str = AppSettings.CONVERTAPI_BASE_URL,
        timeout: float = AppSettings.UPSTREAM_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = httpx.Timeout(timeout)

        self._http_client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            headers={"Authorization": f"Bearer {secret}"},
            transport=transport,
        )

    @staticmethod
    def build_parameters(pdf_url: str) -> dict:
        return {
            "Parameters": [
                {
                    "Name": "File",
                    "FileValue": {"Url": pdf_url},
                }
            ]
        }

    async def convert_pdf_to_docx(self, pdf_url: str) -> str:
        """
        Convert the PDF at pdf_url and return the URL of the DOCX output.

        Raises:
            EmptyConversionError: When the service returns no output file
            UpstreamError: On network/server errors or malformed responses
        """
        try:
            response = await self._http_client.post(
                Endpoint.PDF_TO_DOCX.value,
                json=self.build_parameters(pdf_url),
            )
            response.raise_for_status()
            conversion = ConversionPayload.model_validate(response.json())

        except httpx.TimeoutException as e:
            raise UpstreamError("Conversion request timed out") from e
        except httpx.HTTPStatusError as e:
            raise UpstreamError(
                f"Conversion request failed: {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise UpstreamError(f"Conversion request failed: {e}") from e
        except (ValidationError, ValueError) as e:
            raise UpstreamError(
                "Invalid conversion payload received from server") from e

        if not conversion.Files or not conversion.Files[0].Url:
            raise EmptyConversionError("Conversion returned no output file")

        return conversion.Files[0].Url

    async def aclose(self) -> None:
        await self._http_client.aclose()

    async def __aenter__(self) -> 'ConversionClient':
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.aclose()
