"""
Pytest configuration and shared fixtures for Strategic Advisor tests.
"""
import os
import sys
import pytest
import tempfile
import shutil
from datetime import datetime
from pathlib import Path
from typing import Generator, List
from unittest.mock import Mock, AsyncMock

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

# Keep test runs from writing the rotating log file
os.environ.setdefault("ADVISOR_LOG_FILE", "")

from ai_providers.base import AIResponse, AIProviderType
from config.settings import Settings
from core.agents.template_store import AgentRecord, AgentTemplateStore
from core.delivery.mailer import BaseMailer, OutboundMessage
from core.dispatcher import OutputDispatcher


FIXED_TIME = datetime(2024, 3, 5, 14, 7, 9)


# ============================================================================
# Fixtures: Configuration & Settings
# ============================================================================

@pytest.fixture
def test_settings(temp_dir: Path):
    """Test settings with a mock API key and throwaway directories."""
    return Settings(
        provider="openrouter",
        provider_api_key="test_openrouter_key",
        mail_sender="advisor@example.com",
        mail_recipient="owner@example.com",
        temp_dir=temp_dir / "temp",
        logs_dir=temp_dir / "logs",
        pdf_engine="reportlab",
    )


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    temp_path = Path(tempfile.mkdtemp())
    yield temp_path
    shutil.rmtree(temp_path, ignore_errors=True)


# ============================================================================
# Fixtures: Sample Data
# ============================================================================

@pytest.fixture
def sample_response_text() -> str:
    """Model output exercising every structural class."""
    return (
        "Situation:\n"
        "The manager is asking for unrealistic timelines.\n"
        "\n"
        "Risks:\n"
        "- Burnout\n"
        "- Quality drops\n"
        "Actions:\n"
        "1. Push back with data\n"
        "2. Negotiate scope\n"
    )


@pytest.fixture
def agent_store() -> AgentTemplateStore:
    return AgentTemplateStore([
        AgentRecord(name="SA", base_prompt="Act as a strategic advisor.", description="Strategic Advisor"),
        AgentRecord(name="EA", base_prompt="Act as an executive assistant.", description="Executive Assistant"),
    ])


# ============================================================================
# Fixtures: Mocks
# ============================================================================

class RecordingMailer(BaseMailer):
    """Mailer that keeps messages instead of sending them."""

    def __init__(self):
        self.sent: List[OutboundMessage] = []

    def send(self, message: OutboundMessage) -> None:
        self.sent.append(message)


@pytest.fixture
def mailer() -> RecordingMailer:
    return RecordingMailer()


@pytest.fixture
def mock_provider(sample_response_text):
    """Completion provider returning sample_response_text."""
    provider = Mock()
    provider.complete_prompt = AsyncMock(return_value=AIResponse(
        content=sample_response_text,
        model="xiaomi/mimo-v2-flash:free",
        provider=AIProviderType.OPENROUTER,
    ))
    return provider


def fake_pdf_converter(docx_path: Path, pdf_path: Path) -> Path:
    """Stand-in for the PDF engine: requires the DOCX and writes a stub PDF."""
    assert Path(docx_path).exists()
    Path(pdf_path).write_bytes(b"%PDF-1.4 test")
    return Path(pdf_path)


@pytest.fixture
def dispatcher(agent_store, mock_provider, mailer, temp_dir) -> OutputDispatcher:
    return OutputDispatcher(
        store=agent_store,
        provider=mock_provider,
        mailer=mailer,
        recipient="owner@example.com",
        temp_dir=temp_dir,
        pdf_converter=fake_pdf_converter,
        clock=lambda: FIXED_TIME,
    )
