# docfill/__init__.py
from .tokenizer import TokenScanner, extract_variables
from .substitution import fill, pad_value, substitute

__all__ = ["TokenScanner", "extract_variables", "fill", "pad_value", "substitute"]
