"""SEO Analyzer API – FastAPI app and the single-page analysis endpoint."""

import logging

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
import uvicorn

from analyzer import SiteAnalyzer
from config import ServerConfig, configure_logging, load_server_config
from schemas import AnalysisResult, AnalyzeRequest, ErrorResponse
from urls import InvalidURLError, normalize_url

logger = logging.getLogger(__name__)

INVALID_BODY = 'Invalid request body. Send JSON like {"url": "https://example.com"}.'

app = FastAPI(
    title="SEO Analyzer API",
    description="Single-page SEO checks with a 0-100 score",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


def get_analyzer() -> SiteAnalyzer:
    return SiteAnalyzer()


@app.exception_handler(InvalidURLError)
async def invalid_url_handler(request: Request, exc: InvalidURLError) -> JSONResponse:
    logger.info("Rejected URL for %s: %s", request.url.path, exc)
    return JSONResponse(status_code=400, content={"error": str(exc)})


@app.exception_handler(RequestValidationError)
async def invalid_body_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info("Rejected body for %s: %s", request.url.path, exc.errors())
    return JSONResponse(status_code=400, content={"error": INVALID_BODY})


@app.get("/", response_class=PlainTextResponse)
def root() -> str:
    return "SEO Analyzer Backend is running!"


@app.post(
    "/analyze",
    response_model=AnalysisResult,
    response_model_exclude_none=True,
    responses={400: {"model": ErrorResponse}},
)
def analyze(body: AnalyzeRequest, analyzer: SiteAnalyzer = Depends(get_analyzer)) -> AnalysisResult:
    """
    Pipeline: validate URL -> fetch page -> inspect head -> probe robots/sitemap -> score.
    Always 200 once the URL is valid, even if every check fails.
    """
    url = normalize_url(body.url)
    return analyzer.analyze(url)


@app.get("/health")
def health() -> dict:
    """Health check for deployment."""
    return {"status": "ok"}


def serve(config: ServerConfig | None = None) -> None:
    """Run the API with uvicorn using an explicit server configuration."""
    config = config or load_server_config()
    configure_logging(config.log_level)
    logger.info("Server is running on port %s", config.port)
    uvicorn.run(app, host=config.host, port=config.port, log_level=config.log_level)


if __name__ == "__main__":
    serve()
