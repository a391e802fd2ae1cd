#!/usr/bin/env python3
"""
BloomFlow Safety — Run the API server

Usage:
    python scripts/run_api.py
    python scripts/run_api.py --port 8080
    python scripts/run_api.py --host 127.0.0.1 --port 8000 --catalog my_flags.yaml
"""

import argparse
import logging
import os


def main():
    parser = argparse.ArgumentParser(description='BloomFlow Safety API Server')
    parser.add_argument('--host', default='0.0.0.0', help='Host (default: 0.0.0.0)')
    parser.add_argument('--port', type=int, default=8000, help='Port (default: 8000)')
    parser.add_argument('--reload', action='store_true', help='Enable auto-reload')
    parser.add_argument('--workers', type=int, default=1, help='Number of workers')
    parser.add_argument('--config', help='SafetyConfig YAML')
    parser.add_argument('--catalog', help='Red-flag catalog YAML')
    parser.add_argument('--log-level', default='info', help='Log level (default: info)')

    args = parser.parse_args()

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Read by APIConfig.from_env() when the app module is imported
    os.environ["SAFETY_API_HOST"] = args.host
    os.environ["SAFETY_API_PORT"] = str(args.port)
    if args.config:
        os.environ["SAFETY_CONFIG_PATH"] = args.config
    if args.catalog:
        os.environ["SAFETY_CATALOG_PATH"] = args.catalog

    import uvicorn

    uvicorn.run(
        "bloomflow_safety.api.app:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        workers=args.workers if not args.reload else 1,
        log_level=args.log_level,
    )


if __name__ == "__main__":
    main()
