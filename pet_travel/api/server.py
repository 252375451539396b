"""Run the planner API under uvicorn."""

from __future__ import annotations

import argparse

import uvicorn

APP_PATH = "pet_travel.api.main:app"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pet-travel-api", description="Serve the pet travel planner API.")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8000)
    parser.add_argument("--workers", type=int, default=1)
    parser.add_argument("--reload", action="store_true", help="reload on source changes (development)")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    uvicorn.run(
        APP_PATH,
        host=args.host,
        port=args.port,
        workers=max(1, args.workers),
        reload=args.reload,
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
