"""
API Server Runner

Entry point for running the Meeting Recap FastAPI server with
environment setup and configuration checks.

Design Considerations:
- ``.env`` loaded before any settings are read
- Missing credentials reported at startup but not fatal, since each
  endpoint reports its own configuration errors
- Graceful error management and reporting
"""

import argparse
import logging
import os
import sys
import traceback

import uvicorn
from dotenv import load_dotenv

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger("api_runner")


def parse_arguments():
    """Parse command line arguments for the API server."""
    parser = argparse.ArgumentParser(description="Run the Meeting Recap API server")

    parser.add_argument(
        "--host",
        type=str,
        default="127.0.0.1",
        help="Host to bind the server to (default: 127.0.0.1)"
    )

    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="Port to bind the server to (default: 8000)"
    )

    parser.add_argument(
        "--reload",
        action="store_true",
        help="Enable auto-reload for development"
    )

    parser.add_argument(
        "--env",
        type=str,
        choices=["development", "testing", "production"],
        default="development",
        help="Environment to run in (default: development)"
    )

    return parser.parse_args()


def setup_environment(env):
    """
    Set environment variables for the deployment context.

    Args:
        env: Environment name (development, testing, production)
    """
    load_dotenv()
    os.environ["ENVIRONMENT"] = env

    # Set debug mode for development and testing
    if env in ["development", "testing"]:
        os.environ.setdefault("DEBUG", "true")
    else:
        os.environ.setdefault("DEBUG", "false")


def verify_service_configuration():
    """Warn about credentials the endpoints will need."""
    from api.config import get_settings

    settings = get_settings()
    if not settings.gemini_api_key:
        logger.warning("GEMINI_API_KEY not set: /api/summarize will report a configuration error")

    missing = [
        name for name in ("GMAIL_USER", "GMAIL_APP_PASSWORD", "GMAIL_FROM")
        if not getattr(settings, name)
    ]
    if missing:
        logger.warning(f"Mail settings missing ({', '.join(missing)}): /api/email will report a configuration error")


def main():
    """Run the API server."""
    args = parse_arguments()

    setup_environment(args.env)
    verify_service_configuration()

    logger.info(f"Starting API server in {args.env} mode")
    logger.info(f"Server will be available at http://{args.host}:{args.port}")

    if args.env == "development":
        logger.info(f"API documentation will be available at http://{args.host}:{args.port}/docs")

    uvicorn.run(
        "api.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level="info" if args.env == "production" else "debug"
    )


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        logger.info("Server stopped by user")
        sys.exit(0)
    except Exception as e:
        logger.error(f"Error running server: {str(e)}")
        logger.error(traceback.format_exc())
        sys.exit(1)
