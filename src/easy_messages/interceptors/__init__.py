"""Interceptors: the pipeline plus built-in enrichment hooks."""

from __future__ import annotations

from .correlation import CorrelationIdInterceptor
from .logging import LoggingInterceptor
from .metadata import MetadataEnrichmentInterceptor
from .pipeline import InterceptorPipeline

__all__ = [
    "CorrelationIdInterceptor",
    "InterceptorPipeline",
    "LoggingInterceptor",
    "MetadataEnrichmentInterceptor",
]
