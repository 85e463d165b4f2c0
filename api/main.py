#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
FastAPI Web Server - REST API for the Strategic Advisor.

This module provides the HTTP surface for the agent pipeline:
- Agent runs with HTML, EMAIL or PDF output
- Agent listing for the front end
- Health monitoring
- Static front end (ui/)

Usage:
    # Start server
    uvicorn api.main:app --host 0.0.0.0 --port 8000

    # Or run directly
    python -m api.main

API Documentation:
    - OpenAPI docs: http://localhost:8000/docs
    - ReDoc: http://localhost:8000/redoc

Key Endpoints:
    GET  /api/run?agentname=SA&context=...&outputFormat=HTML - Run an agent
    POST /api/run - Run an agent (JSON body)
    GET  /api/agents - List agents
    GET  /health - Liveness check

Configuration:
    Environment variables (see .env.example):
    - OPENROUTER_API_KEY: completion provider key
    - SMTP_HOST / SMTP_USERNAME / SMTP_PASSWORD: outbound mail
    - MAIL_RECIPIENT: fixed recipient for PDF and EMAIL outputs
"""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from fastapi.responses import HTMLResponse, FileResponse, JSONResponse
from pathlib import Path
import sys
from dotenv import load_dotenv

# Load environment variables from .env file
env_path = Path(__file__).parent.parent / ".env"
load_dotenv(dotenv_path=env_path)

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from config.logging_config import get_logger
from config.settings import settings
from core.errors import AdvisorError
from api.agent_routes import router as agent_router

logger = get_logger(__name__)

UI_DIR = Path(__file__).parent.parent / "ui"

app = FastAPI(
    title="Strategic Advisor API",
    description="Run advisor agents and deliver their output as HTML, email or PDF",
    version="1.0.0",
)

# CORS - the front end may be served from another origin
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=False,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)


@app.exception_handler(AdvisorError)
async def advisor_error_handler(request: Request, exc: AdvisorError):
    logger.error(f"{request.method} {request.url.path} -> {exc.http_status} ({exc.kind}): {exc.message}")
    return JSONResponse(status_code=exc.http_status, content=exc.to_dict())


app.include_router(agent_router)

if UI_DIR.exists():
    app.mount("/ui", StaticFiles(directory=str(UI_DIR), html=True), name="ui")


@app.get("/", response_class=HTMLResponse)
async def root():
    """Serve the front end"""
    index_path = UI_DIR / "index.html"
    if index_path.exists():
        return FileResponse(index_path)

    return HTMLResponse(
        "<html><head><title>Strategic Advisor</title></head>"
        "<body><h1>Strategic Advisor API</h1>"
        "<p>Front end not found. See <a href=\"/docs\">/docs</a> for the API.</p>"
        "</body></html>"
    )


@app.get("/health")
async def health():
    """Liveness check"""
    return {"status": "ok"}


@app.on_event("startup")
async def startup_event():
    logger.info(
        f"Strategic Advisor API starting (provider={settings.provider}, "
        f"model={settings.model}, pdf_engine={settings.pdf_engine})"
    )
    if not settings.mail_recipient:
        logger.warning("MAIL_RECIPIENT is not set; PDF and EMAIL outputs will fail")


if __name__ == "__main__":
    import uvicorn
    logger.info("Starting Strategic Advisor API on http://0.0.0.0:8000")
    uvicorn.run(app, host="0.0.0.0", port=8000, log_level="info")
