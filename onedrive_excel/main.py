"""Command-line entry point: list worksheets and tables of a workbook."""

import argparse
import asyncio
import logging
import sys

import httpx
from pydantic import ValidationError

from onedrive_excel.client import get_onedrive_client
from onedrive_excel.config import get_settings
from onedrive_excel.errors import StatusCodeError

logger = logging.getLogger(__name__)


def setup_logging(log_level: str = "INFO") -> None:
    """Configure logging."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
    )

    # Reduce noise from libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


async def describe_workbook(uri: str) -> dict[str, list[str]]:
    """Collect worksheet and table names of a workbook."""
    workbook = get_onedrive_client().workbook(uri)
    return {
        "worksheets": await workbook.get_worksheet_names(),
        "tables": await workbook.get_table_names(),
    }


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("workbook_uri", nargs="?", help="e.g. /me/drive/items/<id>/workbook")
    args = parser.parse_args(argv)

    try:
        settings = get_settings()
    except ValidationError as e:
        setup_logging()
        logger.error("Invalid configuration: %s", e)
        return 1

    setup_logging(settings.log_level)

    uri = args.workbook_uri or settings.workbook_uri
    if not uri:
        logger.error("No workbook URI given (argument or WORKBOOK_URI)")
        return 1

    try:
        info = asyncio.run(describe_workbook(uri))
    except StatusCodeError as e:
        logger.error("Request failed with status %d: %s", e.status_code, e)
        return 1
    except httpx.HTTPError as e:
        logger.error("Request failed: %s", e)
        return 1

    for kind, names in info.items():
        print(f"{kind}:")
        for name in names:
            print(f"  {name}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
