"""Presales Hub CLI entry point."""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv
from pydantic import ValidationError

env_file = Path.cwd() / ".env"
load_dotenv(env_file)

from presales_hub import __version__
from presales_hub.briefs.models import BriefRequest, GeneratedBrief
from presales_hub.briefs.pipeline import BriefPipelineResult, run_brief_pipeline
from presales_hub.config import get_settings
from presales_hub.database import close_db
from presales_hub.database.repositories import BriefRepository
from presales_hub.llm_providers import LLMProvider

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

logger = logging.getLogger(__name__)


def cmd_serve(args: argparse.Namespace) -> int:
    """Run the HTTP API under uvicorn."""
    import uvicorn

    settings = get_settings()
    host = args.host or settings.host
    port = args.port or settings.port

    print(f"\n=== Presales Hub API ===\n")
    print(f"Listening on http://{host}:{port}")
    print(f"Static bundle: {settings.static_dir.resolve()}\n")

    uvicorn.run(
        "presales_hub.api.server:app",
        host=host,
        port=port,
        reload=args.reload,
        log_level=settings.log_level.lower(),
    )
    return 0


def _print_brief(brief: GeneratedBrief) -> None:
    print(f"Brief Generated For: {brief.industry} | {brief.meeting_type} | {brief.client_role}\n")
    print("Your Elevator Pitch")
    print(f"  {brief.elevator_pitch}\n")

    print("Discovery Questions")
    for i, question in enumerate(brief.discovery_questions, 1):
        print(f"  {i}. {question}")
    print()

    print("Industry Insights")
    for insight in brief.industry_insights:
        print(f"  • {insight}")
    print()

    print("Competitive Positioning")
    for point in brief.positioning:
        print(f"  • {point}")
    print()

    print(f"Relevant Case Study: {brief.case_study.title}")
    print(f"  {brief.case_study.summary}")
    for metric in brief.case_study.metrics:
        print(f"  • {metric}")
    print()


async def _run_brief(args: argparse.Namespace) -> BriefPipelineResult:
    request = BriefRequest(
        industry=args.industry,
        meeting_type=args.meeting_type,
        client_role=args.client_role,
        context=args.context,
    )
    try:
        return await run_brief_pipeline(
            request,
            briefs=BriefRepository() if args.save else None,
            provider=args.provider,
            model=args.model,
        )
    finally:
        await close_db()


def cmd_brief(args: argparse.Namespace) -> int:
    """Generate an executive brief and optionally save it."""
    try:
        result = asyncio.run(_run_brief(args))
    except Exception as e:
        logger.error(f"Brief generation failed: {e}", exc_info=True)
        print(f"\n❌ Brief generation failed: {e}\n")
        return 1

    if args.json:
        print(json.dumps(result.brief.model_dump(by_alias=True), indent=2))
    else:
        print("\n=== Executive Brief ===\n")
        _print_brief(result.brief)

    for warning in result.warnings:
        print(f"⚠ {warning}", file=sys.stderr)
    if result.saved:
        print(f"✓ Saved brief {result.brief_id}", file=sys.stderr)

    return 0


def cmd_config(args: argparse.Namespace) -> int:
    """Display effective configuration."""
    try:
        settings = get_settings()

        print("\n=== Presales Hub Configuration ===\n")
        print(f"Environment: {settings.environment}")
        print(f"Server: {settings.host}:{settings.port}")
        print(f"Static Directory: {settings.static_dir}\n")

        print("LLM:")
        print(f"  Default Provider: {settings.llm.default_provider}")
        print(f"  OpenAI Model: {settings.openai_model}")
        print(f"  Gemini Model: {settings.gemini_model}")
        print(f"  Temperature: {settings.llm.temperature}\n")

        print("MongoDB:")
        print(f"  Database: {settings.mongo_db_name}")
        print(f"  Briefs Collection: {settings.mongo_collection_brief}")
        print(f"  Questions Collection: {settings.mongo_collection_discovery_questions}\n")

        print("API Keys:")
        print(f"  OpenAI: {'✓ Set' if settings.openai_api_key else '✗ Not set'}")
        print(f"  Gemini: {'✓ Set' if settings.gemini_api_key else '✗ Not set'}")
        print(f"  MongoDB URI: {'✓ Set' if settings.mongo_uri else '✗ Not set'}")
        print(f"  Logfire: {'✓ Set' if settings.logfire_token else '✗ Not set'}\n")

        return 0

    except ValidationError as e:
        print("\n❌ Configuration Error:\n")
        for error in e.errors():
            print(f"  • {'.'.join(str(x) for x in error['loc'])}: {error['msg']}")
        print()
        return 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="presales_hub",
        description="Presales Hub: executive briefs and discovery questions",
    )
    parser.add_argument("--version", action="version", version=f"Presales Hub {__version__}")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    parser_serve = subparsers.add_parser("serve", help="Run the HTTP API")
    parser_serve.add_argument("--host", default=None, help="Bind host")
    parser_serve.add_argument("--port", type=int, default=None, help="Bind port")
    parser_serve.add_argument("--reload", action="store_true", help="Auto-reload on code changes")
    parser_serve.set_defaults(func=cmd_serve)

    parser_brief = subparsers.add_parser("brief", help="Generate an executive brief")
    parser_brief.add_argument("--industry", default="", help="Client industry")
    parser_brief.add_argument("--meeting-type", default="", help="Meeting type")
    parser_brief.add_argument("--client-role", default="", help="Client role")
    parser_brief.add_argument("--context", default="", help="Additional free-text context")
    parser_brief.add_argument(
        "--provider",
        choices=[p.value for p in LLMProvider],
        default=None,
        help="LLM provider",
    )
    parser_brief.add_argument("--model", default=None, help="Override the provider's model")
    parser_brief.add_argument("--save", action="store_true", help="Save the brief to MongoDB")
    parser_brief.add_argument("--json", action="store_true", help="Print the brief as JSON")
    parser_brief.set_defaults(func=cmd_brief)

    parser_config = subparsers.add_parser("config", help="Display effective configuration")
    parser_config.set_defaults(func=cmd_config)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
