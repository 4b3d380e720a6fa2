"""Parameter list parsing."""

from .tokenizer import tokenize as tokenize
