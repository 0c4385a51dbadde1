"""Prompts package."""

from .code_review import build_review_prompt, detect_language

__all__ = ["build_review_prompt", "detect_language"]
