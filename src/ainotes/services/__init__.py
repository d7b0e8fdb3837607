"""Services package: AI port, enrichment fan-out and relatedness engine."""

from ainotes.services.ai import AiService, OpenAiService
from ainotes.services.enrichment import Enrichment, enrich
from ainotes.services.relatedness import RelatednessEngine, cosine_similarity

__all__ = [
    "AiService",
    "Enrichment",
    "OpenAiService",
    "RelatednessEngine",
    "cosine_similarity",
    "enrich",
]
