"""Metadata service module: attribute parsing, validation and pipeline models."""
from wikiseo.services.metadata.constants import METADATA_CONSTANTS, TitleMode
from wikiseo.services.metadata.models import PipelineState, PipelineStatus, RenderResult, TitlePolicy
from wikiseo.services.metadata.tag_parser import TagParser
from wikiseo.services.metadata.validator import Validator

__all__ = [
    "METADATA_CONSTANTS",
    "TitleMode",
    "PipelineState",
    "PipelineStatus",
    "RenderResult",
    "TitlePolicy",
    "TagParser",
    "Validator",
]
