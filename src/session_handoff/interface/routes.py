"""API routes — thin controllers that delegate to the use case."""

from __future__ import annotations

from fastapi import APIRouter, Depends, File, Form, UploadFile

from session_handoff.domain.entities import (
    CandidateFile,
    GenerationMode,
    GenerationRequest,
)
from session_handoff.interface.dependencies import get_use_case
from session_handoff.interface.schemas import (
    ErrorResponse,
    GenerateRequest,
    GenerateResponse,
)
from session_handoff.services.generate_handoff import GenerateHandoffUseCase

router = APIRouter()

_ERROR_RESPONSES: dict[int | str, dict[str, object]] = {
    400: {"model": ErrorResponse, "description": "Missing input or unsupported mode"},
    401: {"model": ErrorResponse, "description": "Completion service rejected the API key"},
    429: {"model": ErrorResponse, "description": "Completion service rate limit exceeded"},
    500: {"model": ErrorResponse, "description": "Configuration or completion service error"},
}


@router.post(
    "/generate",
    response_model=GenerateResponse,
    response_model_exclude_none=True,
    responses=_ERROR_RESPONSES,
)
@router.post(
    "/api/summary",
    response_model=GenerateResponse,
    response_model_exclude_none=True,
    responses=_ERROR_RESPONSES,
    include_in_schema=False,
)
async def generate(
    body: GenerateRequest,
    use_case: GenerateHandoffUseCase = Depends(get_use_case),
) -> GenerateResponse:
    """Turn a chat transcript and code into a summary, context document or README."""
    request = GenerationRequest(
        chat_text=body.chat_text,
        code_text=body.code_text,
        mode=GenerationMode.parse(body.mode),
    )
    result = await use_case.execute(request)
    return GenerateResponse.from_result(result)


@router.post(
    "/generate/files",
    response_model=GenerateResponse,
    response_model_exclude_none=True,
    responses=_ERROR_RESPONSES,
)
async def generate_from_files(
    files: list[UploadFile] = File(...),
    mode: str = Form("summary"),
    use_case: GenerateHandoffUseCase = Depends(get_use_case),
) -> GenerateResponse:
    """Same as ``/generate``, but picks the chat and code bodies from uploads."""
    generation_mode = GenerationMode.parse(mode)
    candidates = [
        CandidateFile(
            name=upload.filename or "",
            content=await upload.read(),
            content_type=upload.content_type,
        )
        for upload in files
    ]
    result = await use_case.execute_files(candidates, generation_mode)
    return GenerateResponse.from_result(result)
