"""Summary pipeline and progress endpoints."""

import uuid
from typing import Annotated

from fastapi import APIRouter, Depends, Response
from fastapi.responses import JSONResponse
from media_summary_common.logging import setup_logging

from dependencies import get_pipeline, get_progress_board
from domain import ProgressBoard
from exceptions import SummaryPipelineError
from handlers import SummaryPipeline
from response_models import (
    ErrorResponse,
    ProgressResponse,
    SummarizeRequest,
    SummarizeResponse,
)

logger = setup_logging()

router = APIRouter(tags=["summaries"])

PipelineDep = Annotated[SummaryPipeline, Depends(get_pipeline)]
ProgressBoardDep = Annotated[ProgressBoard, Depends(get_progress_board)]

INVOCATION_HEADER = "X-Invocation-Id"
SUMMARIZE_FAILED = "An error occurred during the summarization process."


@router.post(
    "/summarize",
    response_model=SummarizeResponse,
    responses={500: {"model": ErrorResponse}},
)
def summarize(request: SummarizeRequest, response: Response, pipeline: PipelineDep):
    """
    Summarizes the media at ``url``.

    Runs in the worker threadpool, so progress polls are served while the
    pipeline waits on external services. The invocation id is echoed in the
    ``X-Invocation-Id`` header.
    """
    invocation_id = request.invocation_id or str(uuid.uuid4())
    response.headers[INVOCATION_HEADER] = invocation_id

    try:
        summary = pipeline.run(request.url, invocation_id)
    except SummaryPipelineError:
        return JSONResponse(
            status_code=500,
            content={"error": SUMMARIZE_FAILED},
            headers={INVOCATION_HEADER: invocation_id},
        )
    except Exception as e:
        logger.error(f"Unexpected error summarizing {request.url}: {e}")
        return JSONResponse(
            status_code=500,
            content={"error": SUMMARIZE_FAILED},
            headers={INVOCATION_HEADER: invocation_id},
        )

    return SummarizeResponse(summary=summary.text, title=summary.title)


@router.get("/progress", response_model=ProgressResponse)
def get_progress(board: ProgressBoardDep):
    """Returns the process-wide progress gauge."""
    return ProgressResponse(progress=board.global_progress())


@router.get("/progress/{invocation_id}", response_model=ProgressResponse)
def get_invocation_progress(invocation_id: str, board: ProgressBoardDep):
    """Returns one invocation's progress; 0 once it has finished or if unknown."""
    return ProgressResponse(progress=board.progress_for(invocation_id))
