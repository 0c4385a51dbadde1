"""Greeting tool for MCP server."""

from typing import Literal

Language = Literal["korean", "english", "japanese", "spanish"]

GREETINGS = {
    "korean": "안녕하세요, {name}님! 반갑습니다! 😊",
    "english": "Hello, {name}! Nice to meet you! 😊",
    "japanese": "こんにちは、{name}さん！お会いできて嬉しいです！😊",
    "spanish": "¡Hola, {name}! ¡Mucho gusto! 😊",
}


def greeting(name: str, language: Language = "korean") -> str:
    """
    Greet someone in one of the supported languages.

    Args:
        name: Name of the person to greet
        language: Language for the greeting (default: korean)

    Returns:
        Greeting text
    """
    return GREETINGS[language].format(name=name)
