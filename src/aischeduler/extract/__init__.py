"""Event extraction through the Anthropic Messages API."""

from .client import AnthropicClient
from .config import ExtractConfig, load_config
from .errors import (
    ExtractAPIError,
    ExtractConfigError,
    ExtractError,
    ExtractNetworkError,
    ExtractParseError,
    ExtractRateLimitError,
    ExtractTimeoutError,
    ExtractValidationError,
    format_error_for_user,
)
from .extractor import ExtractionResult, extract_events
from .files import SourceBundle, SourceFile, load_sources
from .parser import clean_response_text, parse_candidates
from .prompt import build_prompt

__all__ = [
    "AnthropicClient",
    "ExtractConfig",
    "load_config",
    "ExtractError",
    "ExtractAPIError",
    "ExtractConfigError",
    "ExtractNetworkError",
    "ExtractParseError",
    "ExtractRateLimitError",
    "ExtractTimeoutError",
    "ExtractValidationError",
    "format_error_for_user",
    "ExtractionResult",
    "extract_events",
    "SourceBundle",
    "SourceFile",
    "load_sources",
    "clean_response_text",
    "parse_candidates",
    "build_prompt",
]
