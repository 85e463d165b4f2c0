#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Settings - Centralized configuration management
"""

import os
from pathlib import Path
from typing import List, Optional
from pydantic_settings import BaseSettings

from .constants import (
    PROVIDER_DEFAULT,
    PROVIDER_MODEL,
    PROVIDER_TEMPERATURE,
    PROVIDER_MAX_TOKENS,
    PROVIDER_TIMEOUT_SECONDS,
    SYSTEM_PROMPT,
    FOOTER_TEXT,
    PDF_ENGINES,
    AGENTS_FILE,
    TEMP_DIR,
)


# Base directory
BASE_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """Application settings"""

    # ========== Completion Provider ==========
    provider: str = PROVIDER_DEFAULT  # openrouter | openai | deepseek
    provider_api_key: str = ""
    provider_base_url: Optional[str] = None  # None = provider default endpoint
    model: str = PROVIDER_MODEL
    system_prompt: str = SYSTEM_PROMPT
    temperature: float = PROVIDER_TEMPERATURE
    max_tokens: int = PROVIDER_MAX_TOKENS
    request_timeout: float = PROVIDER_TIMEOUT_SECONDS

    # ========== Template Store ==========
    agents_file: Path = BASE_DIR / AGENTS_FILE

    # ========== Delivery (SMTP) ==========
    smtp_host: str = "smtp.gmail.com"
    smtp_port: int = 465
    smtp_username: str = ""
    smtp_password: str = ""
    smtp_use_ssl: bool = True  # False = plain connection upgraded with STARTTLS
    mail_sender: str = ""
    # Single fixed recipient for PDF and EMAIL deliveries
    mail_recipient: str = ""

    # ========== Rendering ==========
    footer_text: str = FOOTER_TEXT
    pdf_engine: str = "auto"  # auto | libreoffice | reportlab

    # ========== HTTP ==========
    cors_origins: List[str] = ["*"]

    # ========== Directories ==========
    temp_dir: Path = BASE_DIR / TEMP_DIR
    logs_dir: Path = BASE_DIR / "logs"

    class Config:
        env_file = str(BASE_DIR / ".env")
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"  # Allow extra fields from .env that aren't defined in model

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        for dir_path in [self.temp_dir, self.logs_dir]:
            dir_path.mkdir(exist_ok=True, parents=True)

    def get_api_key(self) -> str:
        """Get API key for the configured provider"""
        if self.provider_api_key:
            return self.provider_api_key

        env_names = {
            "openrouter": "OPENROUTER_API_KEY",
            "openai": "OPENAI_API_KEY",
            "deepseek": "DEEPSEEK_API_KEY",
        }
        env_name = env_names.get(self.provider)
        if env_name is None:
            raise ValueError(f"Unsupported provider: {self.provider}")

        api_key = os.getenv(env_name, "")
        if not api_key:
            raise ValueError(f"{env_name} not set in .env")
        return api_key

    def get_pdf_engine(self) -> str:
        """Validated PDF engine name"""
        engine = self.pdf_engine.lower()
        if engine not in PDF_ENGINES:
            raise ValueError(
                f"Unsupported pdf_engine: {self.pdf_engine} (expected one of {', '.join(PDF_ENGINES)})"
            )
        return engine


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Return the global settings instance (FastAPI dependency)"""
    return settings
