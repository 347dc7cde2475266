"""Development entry point: ``python scripts/run_dev.py --port 5001``."""

import argparse
import os

from app import create_app


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the Height Compare server locally.")
    parser.add_argument("--host", default=os.getenv("HEIGHT_COMPARE_HOST", "127.0.0.1"))
    parser.add_argument(
        "--port",
        type=int,
        default=int(os.getenv("HEIGHT_COMPARE_PORT") or os.getenv("PORT") or "5001"),
    )
    parser.add_argument("--config", help="Path to an alternative config.yml.")
    return parser.parse_args()


if __name__ == "__main__":
    args = _parse_args()
    if args.config:
        os.environ["HEIGHT_COMPARE_CONFIG"] = args.config
    app = create_app()
    app.run(host=args.host, port=args.port, debug=False)
