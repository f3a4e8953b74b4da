"""Normalization of Infer reports into findings and code flows."""

from .flow_builder import CodeFlowBuilder
from .report_normalizer import ReportNormalizer

__all__ = ["CodeFlowBuilder", "ReportNormalizer"]
