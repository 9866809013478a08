"""Command-line entry point.

    python -m citygraph validate [--source csv --data-dir ./data]
    python -m citygraph nearby Guadalajara --max-distance 100 [--json]
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, Optional, Sequence

from pydantic import ValidationError

from .config import AppConfig, DatasetConfig, get_config
from .container import Container
from .domain.errors import CityGraphError, ConfigurationError, DatasetValidationError
from .logging_setup import configure_logging
from .services import NearbyCitiesService

LOG = logging.getLogger("citygraph.cli")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="citygraph", description="Validate city graphs and find nearby cities"
    )
    parser.add_argument(
        "--source", choices=("sample", "json", "csv"), help="Dataset source"
    )
    parser.add_argument("--data-dir", type=Path, help="Directory holding dataset files")
    parser.add_argument("--log-level", help="Logging level (e.g. DEBUG)")

    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("validate", help="Validate the dataset and list every problem")

    nearby = sub.add_parser("nearby", help="List cities directly connected to ORIGIN")
    nearby.add_argument("origin", help="City to search around")
    nearby.add_argument(
        "--max-distance", type=float, help="Inclusive distance bound"
    )
    nearby.add_argument("--json", action="store_true", help="Print JSON output")
    return parser


def _config_from_args(args: argparse.Namespace) -> AppConfig:
    config = get_config()
    overrides: Dict[str, Any] = {}
    if args.source:
        overrides["source"] = args.source
    if args.data_dir:
        overrides["data_dir"] = args.data_dir
    if overrides:
        dataset = DatasetConfig(**{**config.dataset.model_dump(), **overrides})
        config = config.model_copy(update={"dataset": dataset})
    if args.log_level:
        observability = config.observability.model_copy(
            update={"level": args.log_level}
        )
        config = config.model_copy(update={"observability": observability})
    return config


def _load_config(args: argparse.Namespace) -> AppConfig:
    """Build the configuration, turning settings errors into ConfigurationError."""
    try:
        return _config_from_args(args)
    except ValidationError as e:
        first = e.errors()[0] if e.errors() else {}
        setting = ".".join(str(part) for part in first.get("loc", ()))
        raise ConfigurationError(
            f"Invalid configuration for {e.title}",
            setting_name=setting,
            cause=e,
        ) from e


def _print_errors(errors: Sequence[str]) -> None:
    print(f"Dataset is invalid ({len(errors)} problem(s)):")
    for error in errors:
        print(f"  - {error}")


def _run_validate(service: NearbyCitiesService) -> int:
    try:
        result = service.validate()
    except DatasetValidationError as e:
        _print_errors(e.errors)
        return 1
    if not result.ok:
        _print_errors(result.errors)
        return 1
    print("Dataset OK")
    return 0


def _run_nearby(service: NearbyCitiesService, args: argparse.Namespace) -> int:
    try:
        results = service.nearby(args.origin, args.max_distance)
    except DatasetValidationError as e:
        _print_errors(e.errors)
        return 1

    if args.json:
        print(json.dumps([n.as_dict() for n in results], ensure_ascii=False))
        return 0

    if not results:
        print(f"No nearby cities for {args.origin}")
        return 0
    for neighbor in results:
        print(f"{neighbor.to}\t{neighbor.distance:g}")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    try:
        config = _load_config(args)
        configure_logging(config.observability)

        container = Container.create_default(config)
        service: NearbyCitiesService = container.resolve(NearbyCitiesService)
        if args.command == "validate":
            return _run_validate(service)
        return _run_nearby(service, args)
    except CityGraphError as e:
        LOG.error("%s", e)
        print(f"Error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
