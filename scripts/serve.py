"""Run the chart trainer API with uvicorn.

Usage:
  uv run python scripts/serve.py --port 5000

Configuration comes from the environment / ``.env``:
``IFR_SKETCHPAD_DB``, ``IFR_SKETCHPAD_DATA_DIR``, ``IFR_SKETCHPAD_CORS_ORIGINS``.
"""

from __future__ import annotations

import argparse

import uvicorn


def main() -> None:
    ap = argparse.ArgumentParser(description="Serve the IFR Procedure Sketchpad API")
    ap.add_argument("--host", default="127.0.0.1", help="Bind address")
    ap.add_argument("--port", type=int, default=5000, help="Port")
    ap.add_argument("--reload", action="store_true", help="Reload on code changes")
    args = ap.parse_args()

    print(f"API accessible at http://{args.host}:{args.port}/api/charts/LLBG")
    uvicorn.run(
        "ifr_sketchpad.web.app:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level="info",
    )


if __name__ == "__main__":
    main()
