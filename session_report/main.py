from __future__ import annotations

import logging

from dotenv import load_dotenv

from .aggregator import Aggregator
from .config import Config, load_config
from .errors import ReportError
from .loader import read_file
from .reporter import Reporter

logger = logging.getLogger("session-report")


def configure_logging(level: int = logging.WARNING) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )


def run(config: Config) -> bool:
    """Build the usage report for one input file.

    Returns False without touching the output when the input file is absent.
    """
    if not config.input_path.is_file():
        logger.info("Input file %s not found, nothing to do", config.input_path)
        return False

    users, sessions = read_file(config.input_path)
    report = Aggregator().build_report(users, sessions)
    Reporter().write_report(report, config.output_path)

    logger.info(
        "Report done: users=%d sessions=%d browsers=%d",
        report.total_users,
        report.total_sessions,
        report.unique_browsers_count,
    )
    return True


def main() -> None:
    load_dotenv()
    config = load_config()
    configure_logging(config.log_level)

    try:
        run(config)
    except ReportError:
        logger.exception("Report run failed for %s", config.input_path)
        raise


if __name__ == "__main__":
    main()
