"""Marketing dashboard entrypoint."""

from __future__ import annotations

import logging
import os

from marketing_dashboard.application.report_service import run_reporting_pipeline


def main() -> int:
    logging.basicConfig(
        level=os.getenv("MARKETING_LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    result = run_reporting_pipeline()
    return 0 if result.ok else 1


if __name__ == "__main__":
    raise SystemExit(main())
