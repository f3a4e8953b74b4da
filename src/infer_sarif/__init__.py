"""Convert Infer static-analysis reports into SARIF documents."""

from .config import ConverterSettings, load_settings
from .converter import InferConverter

__all__ = ["ConverterSettings", "InferConverter", "load_settings"]
