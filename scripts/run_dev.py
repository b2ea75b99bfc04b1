"""
Run the fitcoach API locally with auto-reload.

Environment comes from .env; host, port and reload can be overridden on
the command line.

Usage:
    python scripts/run_dev.py --port 8080 --no-reload
"""

import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

# Settings are read at import time
from dotenv import load_dotenv

load_dotenv()

import uvicorn

from fitcoach.core.config import settings


def main() -> int:
    parser = argparse.ArgumentParser(description="Run the fitcoach API with uvicorn.")
    parser.add_argument("--host", default="127.0.0.1", help="Bind address (default: 127.0.0.1)")
    parser.add_argument("--port", type=int, default=8000, help="Port (default: 8000)")
    parser.add_argument("--no-reload", action="store_true", help="Disable auto-reload")
    args = parser.parse_args()

    base = f"http://{args.host}:{args.port}"
    print(f"{settings.PROJECT_NAME} v{settings.VERSION}")
    print(f"  database  {settings.DATABASE_URL.split('@')[-1]}")
    print(f"  endpoints {base}/api/v1  (docs at {base}/docs)")

    uvicorn.run(
        "fitcoach.main:app",
        host=args.host,
        port=args.port,
        reload=not args.no_reload,
        log_level=settings.LOG_LEVEL.lower(),
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
