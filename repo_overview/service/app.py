"""FastAPI application entrypoint for repo-overview service mode."""

from __future__ import annotations

import asyncio
from typing import Any, Callable, List, Optional, Tuple

from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ..models import OverviewOptions, OverviewResult
from ..summarizer import Summarizer


class OverviewRequest(BaseModel):
    dir: str = "."
    max_depth: Optional[int] = None
    max_nodes: Optional[int] = None


class ReportRequest(OverviewRequest):
    out: Optional[str] = None


class OverviewResponse(BaseModel):
    name: str
    root: str
    file_count: int
    languages: List[Tuple[str, int]]
    readme_headline: Optional[str] = None
    tree: str
    keyfiles: List[str]


class ReportResponse(BaseModel):
    status: str
    markdown: str
    out: Optional[str] = None


class HealthResponse(BaseModel):
    status: str


def _default_summarizer() -> Summarizer:
    return Summarizer()


def create_app(
    summarizer_factory: Callable[[], Summarizer] = _default_summarizer,
) -> FastAPI:
    """Create the FastAPI application exposing overview and report queries."""
    app = FastAPI(title="Repo Overview Service", version="1.0.0")

    async def get_summarizer() -> Summarizer:
        # Fresh instance per request; scans never share state.
        return summarizer_factory()

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.post("/overview", response_model=OverviewResponse)
    async def overview(
        payload: OverviewRequest,
        summarizer: Summarizer = Depends(get_summarizer),
    ) -> OverviewResponse:
        options = OverviewOptions(
            dir=payload.dir, max_depth=payload.max_depth, max_nodes=payload.max_nodes
        )
        loop = asyncio.get_running_loop()
        result: OverviewResult = await loop.run_in_executor(None, summarizer.summarize, options)
        return OverviewResponse(**result.to_dict())

    @app.post("/report", response_model=ReportResponse)
    async def report(
        payload: ReportRequest,
        summarizer: Summarizer = Depends(get_summarizer),
    ) -> ReportResponse:
        options = OverviewOptions(
            dir=payload.dir,
            max_depth=payload.max_depth,
            max_nodes=payload.max_nodes,
            out=payload.out,
        )

        def _run_report() -> str:
            markdown = summarizer.render(options)
            if options.out:
                summarizer.write_markdown(markdown, options.out)
            return markdown

        loop = asyncio.get_running_loop()
        markdown = await loop.run_in_executor(None, _run_report)
        return ReportResponse(status="ok", markdown=markdown, out=options.out)

    @app.exception_handler(OSError)
    async def os_error_handler(
        _: Any, exc: OSError
    ) -> JSONResponse:  # pragma: no cover - simple mapping
        return JSONResponse(status_code=500, content={"detail": str(exc)})

    return app


def run_service(
    host: str = "127.0.0.1", port: int = 8000
) -> None:  # pragma: no cover - integration path
    import uvicorn

    app = create_app()
    uvicorn.run(app, host=host, port=port)
