#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Output Dispatcher - Run one agent request end to end.

    IDLE -> DISPATCHED -> SUCCEEDED | FAILED

1. Validate agent name and output format (no downstream calls on failure)
2. Look up the agent's base prompt
3. Complete "<base prompt>\\n\\n<context>" with the provider (single attempt)
4. Render the response once into a StructuredDocument
5. Deliver with exactly one exporter:
   - HTML:  fragment returned to the caller
   - EMAIL: inline-styled HTML emailed to the fixed recipient
   - PDF:   DOCX -> PDF attached to an email to the fixed recipient;
            the intermediate files are always cleaned up

Each call to dispatch() owns all of its state; one dispatcher can serve
concurrent requests.
"""

import asyncio
import re
import uuid
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from functools import partial
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Union

from ai_providers.base import BaseAIProvider
from config.constants import (
    DEFAULT_OUTPUT_FORMAT,
    EMAIL_SUBJECT_TEMPLATE,
    FOOTER_TEXT,
    PDF_EMAIL_BODY_TEMPLATE,
    PDF_FILENAME_TEMPLATE,
    SYSTEM_PROMPT,
)
from config.logging_config import get_logger
from core.agents.template_store import AgentTemplateStore
from core.delivery.mailer import Attachment, BaseMailer, OutboundMessage
from core.errors import AdvisorError, AgentNotFoundError, InvalidInputError, ProviderError
from core.export.pdf_adapter import convert_docx_to_pdf
from core.export.transient import TransientFile
from core.formatting.document_model import StructureRenderer, StructuredDocument
from core.formatting.exporters.docx_exporter import DocxDirectiveWriter
from core.formatting.exporters.html_exporter import HtmlExporter, EmailHtmlExporter
from core.formatting.exporters.print_exporter import PrintExporter, PrintDocument

logger = get_logger(__name__)

PdfConverter = Callable[[Path, Path], Path]


class OutputFormat(Enum):
    PDF = "PDF"
    HTML = "HTML"
    EMAIL = "EMAIL"

    @classmethod
    def parse(cls, value: Optional[str]) -> "OutputFormat":
        """Case-insensitive parse; None or blank means the default (PDF)."""
        if value is None or not value.strip():
            return cls(DEFAULT_OUTPUT_FORMAT)
        try:
            return cls(value.strip().upper())
        except ValueError:
            raise InvalidInputError(
                "Invalid outputFormat. Must be PDF, HTML, or EMAIL"
            ) from None


class DispatchState(Enum):
    IDLE = "idle"
    DISPATCHED = "dispatched"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass
class DispatchRequest:
    agent_name: Optional[str]
    context: Optional[str] = ""
    output_format: Optional[str] = None


@dataclass
class DispatchResult:
    """Terminal outcome of one request."""
    state: DispatchState
    message: str
    output_format: Optional[OutputFormat] = None
    output: Optional[str] = None
    extra_context: Optional[str] = None
    error: Optional[AdvisorError] = None

    @property
    def ok(self) -> bool:
        return self.state is DispatchState.SUCCEEDED

    @property
    def http_status(self) -> int:
        return 200 if self.ok else (self.error.http_status if self.error else 500)

    def to_dict(self) -> Dict[str, Any]:
        """Wire payload."""
        if not self.ok:
            return {"status": "error", "message": self.message}

        payload: Dict[str, Any] = {
            "status": "success",
            "message": self.message,
            "outputFormat": self.output_format.value,
        }
        if self.output_format is OutputFormat.HTML:
            payload["output"] = self.output
        payload["extraContext"] = self.extra_context
        return payload

    @classmethod
    def failure(cls, error: AdvisorError) -> "DispatchResult":
        return cls(state=DispatchState.FAILED, message=error.message, error=error)


def _safe_filename(name: str) -> str:
    return re.sub(r"[^A-Za-z0-9_.-]+", "_", name).strip("._") or "agent"


class OutputDispatcher:
    """
    Agent request pipeline.

    Usage:
        dispatcher = OutputDispatcher.from_settings(settings)
        result = await dispatcher.dispatch(DispatchRequest("SA", "deadlines", "HTML"))
        payload = result.to_dict()
    """

    def __init__(
        self,
        store: AgentTemplateStore,
        provider: BaseAIProvider,
        mailer: BaseMailer,
        recipient: str,
        temp_dir: Union[str, Path],
        system_prompt: str = SYSTEM_PROMPT,
        footer_text: str = FOOTER_TEXT,
        pdf_converter: Optional[PdfConverter] = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.store = store
        self.provider = provider
        self.mailer = mailer
        self.recipient = recipient
        self.temp_dir = Path(temp_dir)
        self.system_prompt = system_prompt
        self.pdf_converter = pdf_converter or convert_docx_to_pdf
        self.clock = clock

        self.renderer = StructureRenderer()
        self.html_exporter = HtmlExporter(footer_text=footer_text)
        self.email_exporter = EmailHtmlExporter(footer_text=footer_text)
        self.print_exporter = PrintExporter()

    @classmethod
    def from_settings(cls, settings, provider: Optional[BaseAIProvider] = None,
                      mailer: Optional[BaseMailer] = None) -> "OutputDispatcher":
        from ai_providers.manager import create_provider_from_settings
        from core.delivery.mailer import SmtpMailer

        return cls(
            store=AgentTemplateStore.from_file(settings.agents_file),
            provider=provider or create_provider_from_settings(settings),
            mailer=mailer or SmtpMailer.from_settings(settings),
            recipient=settings.mail_recipient,
            temp_dir=settings.temp_dir,
            system_prompt=settings.system_prompt,
            footer_text=settings.footer_text,
            pdf_converter=partial(convert_docx_to_pdf, engine=settings.get_pdf_engine()),
        )

    # ------------------------------------------------------------------
    # Pipeline
    # ------------------------------------------------------------------

    async def dispatch(self, request: DispatchRequest) -> DispatchResult:
        """Run one request to exactly one terminal outcome. Never raises."""
        state = DispatchState.IDLE
        agent_name = request.agent_name or ""

        try:
            output_format = self._validate(request)
            extra_context = request.context or ""
            base_prompt = self._lookup(agent_name)

            state = DispatchState.DISPATCHED
            logger.info(f"[{agent_name}] {state.value}: format={output_format.value}")

            text = await self._complete(base_prompt, extra_context)
            doc = self.renderer.render(text, agent_name=agent_name, extra_context=extra_context)
            logger.debug(f"[{agent_name}] rendered {doc.to_dict()}")

            if output_format is OutputFormat.HTML:
                result = self._respond_html(doc)
            elif output_format is OutputFormat.EMAIL:
                result = await self._send_email(doc)
            else:
                result = await self._send_pdf(doc)

        except AdvisorError as e:
            logger.error(f"[{agent_name}] failed in {state.value} ({e.kind}): {e.message}")
            return DispatchResult.failure(e)
        except Exception as e:
            logger.exception(f"[{agent_name}] unexpected failure in {state.value}")
            return DispatchResult.failure(AdvisorError(str(e) or e.__class__.__name__))

        logger.info(f"[{agent_name}] {result.state.value}: {result.message}")
        return result

    def _validate(self, request: DispatchRequest) -> OutputFormat:
        if not request.agent_name or not request.agent_name.strip():
            raise InvalidInputError("Missing agentname parameter")
        return OutputFormat.parse(request.output_format)

    def _lookup(self, agent_name: str) -> str:
        base_prompt = self.store.get_base_prompt(agent_name)
        if base_prompt is None:
            raise AgentNotFoundError(agent_name)
        return base_prompt

    async def _complete(self, base_prompt: str, extra_context: str) -> str:
        full_prompt = f"{base_prompt}\n\n{extra_context}"
        response = await self.provider.complete_prompt(full_prompt, system_prompt=self.system_prompt)
        if not response.has_content:
            raise ProviderError("Completion response contained no content")
        return response.content

    # ------------------------------------------------------------------
    # Deliveries
    # ------------------------------------------------------------------

    def _success(self, doc: StructuredDocument, output_format: OutputFormat,
                 message: str, output: Optional[str] = None) -> DispatchResult:
        return DispatchResult(
            state=DispatchState.SUCCEEDED,
            message=message,
            output_format=output_format,
            output=output,
            extra_context=doc.extra_context,
        )

    def _respond_html(self, doc: StructuredDocument) -> DispatchResult:
        html = self.html_exporter.export(doc, generated_at=self.clock())
        return self._success(
            doc, OutputFormat.HTML,
            f"HTML successfully generated for {doc.agent_name}",
            output=html,
        )

    async def _send_email(self, doc: StructuredDocument) -> DispatchResult:
        html = self.email_exporter.export(doc, generated_at=self.clock())
        message = OutboundMessage(
            to=self.recipient,
            subject=EMAIL_SUBJECT_TEMPLATE.format(agent_name=doc.agent_name),
            html_body=html,
        )
        await asyncio.to_thread(self.mailer.send, message)
        return self._success(doc, OutputFormat.EMAIL, f"HTML email sent for {doc.agent_name}")

    async def _send_pdf(self, doc: StructuredDocument) -> DispatchResult:
        print_doc = self.print_exporter.export(doc)
        stem = f"{_safe_filename(doc.agent_name)}-Output-{uuid.uuid4().hex[:8]}"

        with TransientFile(self.temp_dir / f"{stem}.docx") as docx_path:
            pdf_bytes = await asyncio.to_thread(self._build_pdf, print_doc, docx_path)
            message = OutboundMessage(
                to=self.recipient,
                subject=EMAIL_SUBJECT_TEMPLATE.format(agent_name=doc.agent_name),
                text_body=PDF_EMAIL_BODY_TEMPLATE.format(agent_name=doc.agent_name),
                attachments=[Attachment(
                    filename=PDF_FILENAME_TEMPLATE.format(agent_name=doc.agent_name),
                    content=pdf_bytes,
                )],
            )
            await asyncio.to_thread(self.mailer.send, message)

        return self._success(doc, OutputFormat.PDF, f"PDF report sent for {doc.agent_name}")

    def _build_pdf(self, print_doc: PrintDocument, docx_path: Path) -> bytes:
        """Realize the DOCX, convert it and return the PDF bytes."""
        DocxDirectiveWriter().write(print_doc, docx_path)
        with TransientFile(docx_path.with_suffix(".pdf")) as pdf_path:
            produced = self.pdf_converter(docx_path, pdf_path)
            return Path(produced).read_bytes()
