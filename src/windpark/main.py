"""Command line entry point serving a wind park over HTTP."""

from __future__ import annotations

import argparse
import logging

import uvicorn

from .api import create_app
from .config import ParkConfig
from .core import WindPark

logger = logging.getLogger("windpark.main")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="windpark",
        description="Serve the wind park production planner over HTTP."
    )
    parser.add_argument("--config", help="YAML or JSON park configuration. Defaults to the sample fleet A-E.")
    parser.add_argument("--host", help="Override the configured host.")
    parser.add_argument("--port", type=int, help="Override the configured port.")
    return parser


def load_config(path: str | None) -> ParkConfig:
    if path:
        return ParkConfig.load_from_file(path)
    return ParkConfig.with_sample_turbines()


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    config = load_config(args.config)
    if args.host:
        config.api.host = args.host
    if args.port:
        config.api.port = args.port

    park = WindPark(config)
    logger.info(
        f"Loaded park '{config.name}' with {len(park.registry.list_all_turbines())} turbines "
        f"({park.maximum_capacity}MWh capacity)"
    )

    app = create_app(park, prefix=config.api.prefix)
    uvicorn.run(app, host=config.api.host, port=config.api.port,
                log_level=config.monitoring.log_level.lower())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
