"""Tool, prompt and resource declarations for the greeting MCP server."""

from typing import Callable, Dict

from mcp.types import GetPromptResult, Prompt, PromptArgument, PromptMessage, Resource, TextContent, Tool

from greeting_server.prompts import build_review_prompt, detect_language
from greeting_server.resources import SERVER_SPEC_URI, build_server_spec
from greeting_server.resources.server_spec import SERVER_SPEC_NAME
from greeting_server.tools import add, divide, get_current_time, greeting, multiply, subtract


def _number_pair_schema(first: str, second: str) -> dict:
    return {
        "type": "object",
        "properties": {
            "a": {
                "type": "number",
                "description": first
            },
            "b": {
                "type": "number",
                "description": second
            }
        },
        "required": ["a", "b"]
    }


# Define available tools
TOOLS = [
    Tool(
        name="greeting",
        description="Friendly greeting tool that can greet users in various languages",
        inputSchema={
            "type": "object",
            "properties": {
                "name": {
                    "type": "string",
                    "description": "Name of the person to greet"
                },
                "language": {
                    "type": "string",
                    "enum": ["korean", "english", "japanese", "spanish"],
                    "description": "Language for the greeting (default: korean)"
                }
            },
            "required": ["name"]
        }
    ),
    Tool(
        name="add",
        description="Addition calculator that adds two numbers",
        inputSchema=_number_pair_schema("First number", "Second number")
    ),
    Tool(
        name="subtract",
        description="Subtraction calculator that subtracts second number from first number",
        inputSchema=_number_pair_schema("First number (minuend)", "Second number (subtrahend)")
    ),
    Tool(
        name="multiply",
        description="Multiplication calculator that multiplies two numbers",
        inputSchema=_number_pair_schema("First number", "Second number")
    ),
    Tool(
        name="divide",
        description="Division calculator that divides first number by second number",
        inputSchema=_number_pair_schema("First number (dividend)", "Second number (divisor)")
    ),
    Tool(
        name="time",
        description="Get current time in specified timezone",
        inputSchema={
            "type": "object",
            "properties": {
                "timezone": {
                    "type": "string",
                    "description": 'Timezone (e.g., "Asia/Seoul", "America/New_York", "Europe/London", "UTC"). Defaults to "UTC"',
                    "default": "UTC"
                }
            }
        }
    )
]


TOOL_HANDLERS: Dict[str, Callable[[dict], str]] = {
    "greeting": lambda args: greeting(
        name=args["name"],
        language=args.get("language", "korean")
    ),
    "add": lambda args: add(a=args["a"], b=args["b"]),
    "subtract": lambda args: subtract(a=args["a"], b=args["b"]),
    "multiply": lambda args: multiply(a=args["a"], b=args["b"]),
    "divide": lambda args: divide(a=args["a"], b=args["b"]),
    "time": lambda args: get_current_time(timezone=args.get("timezone", "UTC")),
}


PROMPTS = [
    Prompt(
        name="code-review",
        description="Generate a comprehensive code review prompt for the provided code",
        arguments=[
            PromptArgument(
                name="code",
                description="The code to be reviewed",
                required=True
            )
        ]
    )
]


def _code_review(arguments: Dict[str, str]) -> GetPromptResult:
    if "code" not in arguments:
        raise ValueError("Missing required argument: code")
    code = arguments["code"]
    return GetPromptResult(
        description=f"Code review prompt for {detect_language(code)} code",
        messages=[
            PromptMessage(
                role="user",
                content=TextContent(type="text", text=build_review_prompt(code))
            )
        ]
    )


PROMPT_HANDLERS: Dict[str, Callable[[Dict[str, str]], GetPromptResult]] = {
    "code-review": _code_review,
}


RESOURCES = [
    Resource(
        uri=SERVER_SPEC_URI,
        name=SERVER_SPEC_NAME,
        title="Server Specification",
        description="Server specification and available tools information",
        mimeType="text/markdown"
    )
]


# Resources are rendered on every read, never cached
RESOURCE_HANDLERS: Dict[str, Callable[[], str]] = {
    SERVER_SPEC_URI: build_server_spec,
}
