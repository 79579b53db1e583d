"""POST /parse: extract quotations from a chat export."""

import structlog
from fastapi import APIRouter, Depends, Header, HTTPException
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from watch_quotes.errors import WatchQuotesError
from watch_quotes.models.upload import TranscriptUpload
from watch_quotes.pipeline.pipeline import TranscriptPipeline

from ..config import Settings, get_settings

logger = structlog.get_logger(__name__)

router = APIRouter()


class ParseRequest(BaseModel):
    """Either raw transcript text, or a base64 upload with its filename."""

    text: str | None = Field(default=None, description='Transcript text')
    filename: str | None = Field(default=None, description='Original export filename')
    content: str | None = Field(default=None, description='Base64 encoded transcript bytes')
    include_messages: bool = Field(default=False, description='Return segmented messages too')


def _check_size(size: int, settings: Settings) -> None:
    if size > settings.MAX_UPLOAD_BYTES:
        raise HTTPException(
            status_code=413,
            detail=f"Transcript exceeds {settings.MAX_UPLOAD_BYTES} bytes",
        )


# Sync endpoint: parsing is CPU-bound and runs in FastAPI's threadpool
@router.post("/parse")
def parse_transcript(
    request: ParseRequest,
    settings: Settings = Depends(get_settings),
    x_trace_id: str | None = Header(default=None),
):
    """Parse a transcript and return its quotations."""
    if request.text is None and request.content is None:
        raise HTTPException(status_code=422, detail="Provide either 'text' or 'content'")

    log = logger.bind(filename=request.filename, trace_id=x_trace_id)
    pipeline = TranscriptPipeline(country_code=settings.DEFAULT_COUNTRY_CODE)

    try:
        if request.text is not None:
            _check_size(len(request.text.encode('utf-8')), settings)
            result = pipeline.parse(request.text, source_name=request.filename, trace_id=x_trace_id)
        else:
            # base64 expands 3 bytes into 4 characters
            _check_size(len(request.content) * 3 // 4, settings)
            upload = TranscriptUpload(filename=request.filename or 'upload.txt', content=request.content)
            result = pipeline.parse_upload(upload, trace_id=x_trace_id)
    except HTTPException:
        raise
    except WatchQuotesError as e:
        log.warning("parse.rejected", error=e.message, context=e.context)
        raise HTTPException(status_code=422, detail=e.message)
    except Exception as e:
        log.error("parse.failed", error=str(e), error_type=type(e).__name__)
        return JSONResponse(
            status_code=500,
            content={"error": str(e), "success": False},
        )

    log.info(
        "parse.complete",
        total_messages=result.total_messages,
        total_quotations=result.total_quotations,
    )
    return result.to_dict(include_messages=request.include_messages)
