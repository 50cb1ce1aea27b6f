"""pyglob - Grapheme-aware wildcard matching."""

from __future__ import annotations

# Core
from pyglob.matcher import Matcher, is_wildcard_match, match_graphemes
from pyglob.segmentation import graphemes
from pyglob.types import ANY_ONE, ANY_RUN, MemoStrategy

# Preprocessing
from pyglob.preprocessing import collapse_stars, preprocess, strip_common_affixes

# Config
from pyglob.config import Config, MatchSettings

# Errors
from pyglob.errors import (
    ConfigError,
    ConfigNotFoundError,
    ErrorCodes,
    InvalidInputError,
    PyglobError,
)

# Observability
from pyglob.observability import MetricsCollector

__version__ = "0.1.0"

__all__ = [
    # Core
    "is_wildcard_match",
    "match_graphemes",
    "graphemes",
    "Matcher",
    "MemoStrategy",
    "ANY_RUN",
    "ANY_ONE",
    # Preprocessing
    "preprocess",
    "collapse_stars",
    "strip_common_affixes",
    # Config
    "Config",
    "MatchSettings",
    # Errors
    "ErrorCodes",
    "PyglobError",
    "ConfigError",
    "ConfigNotFoundError",
    "InvalidInputError",
    # Observability
    "MetricsCollector",
]
