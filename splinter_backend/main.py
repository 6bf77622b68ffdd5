"""Main module entrypoint for local runtime execution.

This module validates startup configuration and either launches the FastAPI
service or runs one batch status query against the configured node.
"""

import argparse
import asyncio
import json
import logging

import uvicorn

from splinter_backend.adapters import BackendClientError
from splinter_backend.bootstrap import bootstrap_create_application, bootstrap_create_backend_client
from splinter_backend.config import SplinterSettings, config_load_settings
from splinter_backend.domain import BatchStatuses

logger = logging.getLogger(__name__)


def main() -> None:
    """Run selected runtime command with validated startup configuration.

    Raises:
        SettingsLoadError: Raised when configuration validation fails.
        SystemExit: Raised with status 1 when a backend call fails.
    """

    argument_parser = argparse.ArgumentParser(description="Splinter backend client runtime entrypoint")
    argument_parser.add_argument(
        "command",
        nargs="?",
        default="api",
        choices=("api", "batch-status"),
        help="Runtime command: `api` starts server, `batch-status` queries batch statuses once",
        type=str,
    )
    argument_parser.add_argument(
        "--service-id",
        dest="service_id",
        type=str,
        help="Fully-qualified service id `<circuit_id>::<service_id>` for `batch-status`",
    )
    argument_parser.add_argument(
        "--id",
        dest="batch_ids",
        type=str,
        default="",
        help="Comma-separated batch ids for `batch-status`",
    )
    argument_parser.add_argument(
        "--wait",
        dest="wait",
        type=int,
        help="Optional server-side wait in seconds for `batch-status`",
    )
    parsed_arguments = argument_parser.parse_args()

    settings = config_load_settings()
    main_setup_logging(settings)

    if parsed_arguments.command == "batch-status":
        batch_ids = [batch_id for batch_id in parsed_arguments.batch_ids.split(",") if batch_id]
        if not batch_ids:
            argument_parser.error("--id is required for `batch-status`")
        query = BatchStatuses(
            service_id=parsed_arguments.service_id,
            batch_ids=batch_ids,
            wait=parsed_arguments.wait,
        )
        try:
            batch_statuses = asyncio.run(bootstrap_create_backend_client(settings).batch_status(query))
        except BackendClientError as error:
            logger.error("Batch status query failed: %s", error.message)
            raise SystemExit(1) from error
        print(json.dumps([batch_status.domain_to_payload() for batch_status in batch_statuses], indent=2))
        return

    application = bootstrap_create_application(settings)
    uvicorn.run(
        application,
        host=settings.application_host,
        port=settings.application_port,
    )


def main_setup_logging(settings: SplinterSettings) -> None:
    """Configure root logging from settings.

    Args:
        settings: Validated runtime settings.
    """

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        force=True,
    )
    if settings.log_level != "DEBUG":
        logging.getLogger("httpx").setLevel(logging.WARNING)


if __name__ == "__main__":
    main()
