"""
Backend Environment Configuration - scormchat

Settings tables for the chat backend in development and production.
"""

import os
from typing import Dict, List, Optional, Callable
from pydantic import BaseModel, Field


class CorsConfig(BaseModel):
    """Allowed browser origins for the chat API"""
    origins: List[str] = Field(..., description="Allowed origins")
    credentials: bool = Field(True, description="Whether cookies are allowed cross-origin")


class AIConfig(BaseModel):
    """LLM provider settings"""
    provider: str = Field("gemini", description="LLM provider name")
    model: str = Field("gemini-1.5-flash-latest", description="Model identifier")
    temperature: float = Field(0.7, ge=0, le=2, description="Sampling temperature")
    max_tokens: int = Field(2048, gt=0, description="Maximum tokens per completion")
    timeout_ms: int = Field(30000, gt=0, description="Provider timeout in milliseconds")


class SessionConfig(BaseModel):
    """Chat session lifetime"""
    max_age_ms: int = Field(..., gt=0, description="Session lifetime in milliseconds")
    cleanup_interval_ms: int = Field(..., gt=0, description="Expired-session sweep interval in milliseconds")


class RateLimitConfig(BaseModel):
    """Per-client request limits"""
    window_ms: int = Field(15 * 60 * 1000, gt=0, description="Window length in milliseconds")
    max: int = Field(..., gt=0, description="Requests allowed per window")
    message: str = Field(..., description="Message returned when the limit is hit")


class LoggingConfig(BaseModel):
    """Log destinations"""
    level: str = Field("info", description="Minimum log level")
    console: bool = Field(True, description="Log to the console")
    file: bool = Field(False, description="Log to a file")
    filename: Optional[str] = Field(None, description="Log file path when file logging is on")


class BackendConfig(BaseModel):
    """Complete chat backend configuration for one environment"""
    port: int = Field(3000, gt=0, lt=65536, description="HTTP port")
    environment: str = Field(..., description="Environment name")
    cors: CorsConfig
    ai: AIConfig
    session: SessionConfig
    rate_limit: RateLimitConfig
    logging: LoggingConfig


def development_config() -> BackendConfig:
    return BackendConfig(
        port=3000,
        environment="development",
        cors=CorsConfig(
            origins=[
                "http://localhost:8080",
                "http://localhost:3000",
                "http://127.0.0.1:8080",
                "file://",  # local SCORM testing
            ],
            credentials=True,
        ),
        ai=AIConfig(temperature=0.7, max_tokens=2048, timeout_ms=30000),
        session=SessionConfig(max_age_ms=3600000, cleanup_interval_ms=300000),
        rate_limit=RateLimitConfig(max=100, message="Too many requests, please try again later"),
        logging=LoggingConfig(level="debug", console=True, file=False),
    )


def production_config() -> BackendConfig:
    return BackendConfig(
        port=int(os.getenv("PORT", "3000")),
        environment="production",
        cors=CorsConfig(
            origins=[
                os.getenv("LMS_DOMAIN", "https://prod.edrevel.com"),
                "http://localhost:8080",
            ],
            credentials=True,
        ),
        ai=AIConfig(temperature=0.6, max_tokens=1500, timeout_ms=25000),
        session=SessionConfig(max_age_ms=1800000, cleanup_interval_ms=600000),
        rate_limit=RateLimitConfig(max=50, message="Rate limit exceeded. Please try again later."),
        logging=LoggingConfig(level="info", console=False, file=True, filename="logs/app.log"),
    )


ENVIRONMENTS: Dict[str, Callable[[], BackendConfig]] = {
    "development": development_config,
    "production": production_config,
}


def get_config(environment: Optional[str] = None) -> BackendConfig:
    """Resolve the config for ``environment`` (default: ``APP_ENV`` or development)

    Raises:
        ValueError: If the environment name is unknown
    """
    name = (environment or os.getenv("APP_ENV") or "development").lower()
    try:
        factory = ENVIRONMENTS[name]
    except KeyError:
        raise ValueError(
            f"Unknown environment '{name}'. Expected one of: {', '.join(sorted(ENVIRONMENTS))}"
        ) from None
    return factory()
