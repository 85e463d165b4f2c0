"""
Agent API Routes
Strategic Advisor - Dispatch endpoints

GET  /api/run?agentname=SA&context=...&outputFormat=HTML
POST /api/run  {"agentname": "SA", "context": "...", "outputFormat": "HTML"}
GET  /api/agents
"""

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field
from typing import Optional, List

from config.logging_config import get_logger
from config.settings import get_settings
from core.agents.template_store import AgentTemplateStore
from core.dispatcher import OutputDispatcher, DispatchRequest
from core.errors import ConfigurationError

logger = get_logger(__name__)


# =========================================
# Pydantic Models
# =========================================

class RunRequest(BaseModel):
    """Agent run request"""
    agentname: Optional[str] = Field(None, description="Agent code, e.g. EA, SA, CT, SM")
    context: Optional[str] = Field("", description="Task description appended to the agent prompt")
    outputFormat: Optional[str] = Field(None, description="PDF | HTML | EMAIL (default PDF)")
    outputformat: Optional[str] = Field(None, description="Lower-case alias of outputFormat")


class AgentSummary(BaseModel):
    name: str
    description: str = ""


class AgentsListResponse(BaseModel):
    agents: List[AgentSummary]


# =========================================
# Global Dispatcher / Template Store
# =========================================

_dispatcher: Optional[OutputDispatcher] = None
_template_store: Optional[AgentTemplateStore] = None


def get_dispatcher() -> OutputDispatcher:
    """Get or create the global dispatcher"""
    global _dispatcher

    if _dispatcher is None:
        try:
            _dispatcher = OutputDispatcher.from_settings(get_settings())
        except ValueError as e:
            logger.error(f"Dispatcher configuration failed: {e}")
            raise ConfigurationError(f"Service not configured: {e}") from e

    return _dispatcher


def get_template_store() -> AgentTemplateStore:
    """Get or load the agent templates without building the dispatcher"""
    global _template_store

    if _template_store is None:
        settings = get_settings()
        try:
            _template_store = AgentTemplateStore.from_file(settings.agents_file)
        except ValueError as e:
            logger.error(f"Agent templates failed to load: {e}")
            raise ConfigurationError(f"Service not configured: {e}") from e

    return _template_store


def reset_dispatcher():
    """Reset the global dispatcher and template store (useful for testing)"""
    global _dispatcher, _template_store
    _dispatcher = None
    _template_store = None


# =========================================
# Router
# =========================================

router = APIRouter(prefix="/api", tags=["Agents"])


async def _run(dispatcher: OutputDispatcher, request: DispatchRequest) -> JSONResponse:
    result = await dispatcher.dispatch(request)
    return JSONResponse(status_code=result.http_status, content=result.to_dict())


@router.get("/run")
async def run_agent_get(
    agentname: Optional[str] = Query(None),
    context: Optional[str] = Query(""),
    outputFormat: Optional[str] = Query(None),
    outputformat: Optional[str] = Query(None),
    dispatcher: OutputDispatcher = Depends(get_dispatcher),
):
    """
    Run an agent with URL parameters.

    - HTML: rendered fragment returned in `output`
    - PDF: report emailed as an attachment
    - EMAIL: report emailed as a styled HTML body
    """
    return await _run(dispatcher, DispatchRequest(
        agent_name=agentname,
        context=context,
        output_format=outputFormat or outputformat,
    ))


@router.post("/run")
async def run_agent_post(
    request: RunRequest,
    dispatcher: OutputDispatcher = Depends(get_dispatcher),
):
    """Run an agent with a JSON body."""
    return await _run(dispatcher, DispatchRequest(
        agent_name=request.agentname,
        context=request.context,
        output_format=request.outputFormat or request.outputformat,
    ))


@router.get("/agents", response_model=AgentsListResponse)
async def list_agents(store: AgentTemplateStore = Depends(get_template_store)):
    """List configured agents for the front end."""
    return AgentsListResponse(agents=[
        AgentSummary(name=record.name, description=record.description)
        for record in store.list_agents()
    ])
