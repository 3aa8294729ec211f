"""
JSON Flow command-line entry point.

Usage:
    # Print the generated UI schema
    json-flow generate schema.json

    # Validate data, exit status 1 when errors are found
    json-flow validate schema.json data.json

    # Print a built-in template
    json-flow template survey

    # MCP server, stdio mode (desktop clients)
    json-flow serve --transport stdio

    # MCP server, SSE mode (Docker/remote)
    json-flow serve --transport sse --port 8080
"""

import argparse
import asyncio
import json
import logging
import re
import sys
from pathlib import Path
from typing import Any

from json_flow.checker import check_schema
from json_flow.config import get_config
from json_flow.generator import generate_ui_schema
from json_flow.templates import get_template, list_templates
from json_flow.validator import validate_form


def _load_json(path: str) -> Any:
    return json.loads(Path(path).read_text(encoding="utf-8"))


def _print_json(payload: Any) -> None:
    print(json.dumps(payload, indent=get_config().indent_json_output))


def cmd_generate(args: argparse.Namespace) -> int:
    schema = _load_json(args.schema)
    _print_json(generate_ui_schema(schema).to_dict())
    return 0


def cmd_validate(args: argparse.Namespace) -> int:
    schema = _load_json(args.schema)
    data = _load_json(args.data)
    errors = validate_form(data, schema)
    _print_json([error.model_dump() for error in errors])
    return 1 if errors else 0


def cmd_check(args: argparse.Namespace) -> int:
    result = check_schema(_load_json(args.schema))
    _print_json(result.model_dump())
    return 0 if result.is_valid else 1


def cmd_template(args: argparse.Namespace) -> int:
    if args.name is None:
        print("\n".join(list_templates()))
        return 0
    try:
        schema = get_template(args.name)
    except KeyError as e:
        print(f"Error: {e.args[0]}", file=sys.stderr)
        return 1
    _print_json(schema)
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    from json_flow.mcp_server import run_mcp_server

    print("=" * 60, file=sys.stderr)
    print("JSON Flow MCP Server", file=sys.stderr)
    print("=" * 60, file=sys.stderr)
    print(f"Transport: {args.transport}", file=sys.stderr)
    if args.transport == "sse":
        print(f"Host: {args.host}", file=sys.stderr)
        print(f"Port: {args.port}", file=sys.stderr)
    print("=" * 60, file=sys.stderr)

    try:
        asyncio.run(
            run_mcp_server(
                transport=args.transport,
                host=args.host,
                port=args.port,
            )
        )
    except KeyboardInterrupt:
        print("\nServer stopped.", file=sys.stderr)
    return 0


def build_parser() -> argparse.ArgumentParser:
    config = get_config()

    parser = argparse.ArgumentParser(
        prog="json-flow",
        description="Generate UI schemas from JSON Schema and validate form data",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Environment Variables:
  MCP_TRANSPORT             Transport type: stdio or sse (default: stdio)
  MCP_HOST                  Host for SSE transport (default: 0.0.0.0)
  MCP_PORT                  Port for SSE transport (default: 8080)
  JSON_FLOW_LOG_LEVEL       Logging level (default: INFO)
  JSON_FLOW_INDENT          JSON output indentation (default: 2)
  JSON_FLOW_VERBOSE_OUTPUT  Log at DEBUG level when true (default: false)
        """,
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate = subparsers.add_parser("generate", help="Print the UI schema for a JSON Schema file")
    generate.add_argument("schema", help="Path to the JSON Schema file")
    generate.set_defaults(func=cmd_generate)

    validate = subparsers.add_parser("validate", help="Validate a data file against a JSON Schema file")
    validate.add_argument("schema", help="Path to the JSON Schema file")
    validate.add_argument("data", help="Path to the JSON data file")
    validate.set_defaults(func=cmd_validate)

    check = subparsers.add_parser("check", help="Report structural problems of a JSON Schema file")
    check.add_argument("schema", help="Path to the JSON Schema file")
    check.set_defaults(func=cmd_check)

    template = subparsers.add_parser("template", help="Print a built-in template, or list them")
    template.add_argument("name", nargs="?", help=f"Template name: {', '.join(list_templates())}")
    template.set_defaults(func=cmd_template)

    serve = subparsers.add_parser("serve", help="Run the MCP server")
    serve.add_argument(
        "--transport",
        choices=["stdio", "sse"],
        default=config.mcp_transport,
        help=f"Transport type (default: {config.mcp_transport})",
    )
    serve.add_argument(
        "--host",
        default=config.mcp_host,
        help=f"Host for SSE transport (default: {config.mcp_host})",
    )
    serve.add_argument(
        "--port",
        type=int,
        default=config.mcp_port,
        help=f"Port for SSE transport (default: {config.mcp_port})",
    )
    serve.set_defaults(func=cmd_serve)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    config = get_config()
    logging.basicConfig(level=config.effective_log_level, stream=sys.stderr)

    args = build_parser().parse_args(argv)
    try:
        return args.func(args)
    except (OSError, ValueError, re.error) as e:
        # json.JSONDecodeError and pydantic.ValidationError are ValueErrors
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
