import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from replypilot import __version__
from replypilot.config import settings
from replypilot.errors import ReplyPilotError
from replypilot.routers import reply
from replypilot.services.providers import OPENAI, build_providers
from replypilot.services.reply_router import ReplyRouter
from replypilot.services.usage import UsageTracker

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the provider clients and the reply router once per process."""
    logger.info("Starting up, configuring providers...")
    providers = build_providers(settings)
    app.state.reply_router = ReplyRouter(
        providers=providers,
        usage=UsageTracker(limit=settings.usage_limit),
        corrector=OPENAI,
        max_sentences=settings.max_sentences,
    )
    logger.info("Startup complete.")
    yield
    logger.info("Shutting down.")


app = FastAPI(
    title="ReplyPilot",
    description="Writes short public seller replies to Shopee, Lazada and TikTok Shop reviews.",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(reply.router)


@app.exception_handler(ReplyPilotError)
async def replypilot_error_handler(request: Request, exc: ReplyPilotError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_body())


@app.get("/", response_class=PlainTextResponse, include_in_schema=False)
async def root():
    return "ReplyPilot backend running"


@app.get("/health", tags=["health"])
@app.get("/status", tags=["health"])
async def health_check():
    return {
        "status": "ok",
        "version": __version__,
        "port": settings.port,
        "groqConfigured": bool(settings.groq_api_key),
        "geminiConfigured": bool(settings.gemini_api_key),
        "openaiConfigured": bool(settings.openai_api_key),
    }


def run():
    uvicorn.run("replypilot.main:app", host=settings.host, port=settings.port, log_level=settings.log_level.lower())
