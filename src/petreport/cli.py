from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from petreport.collectors.current import describe_current_interpreter
from petreport.core.report import EnvironmentReport
from petreport.output.jsonout import to_json
from petreport.output.text import print_report


def main(argv: Optional[Sequence[str]] = None) -> int:
    ap = argparse.ArgumentParser(
        prog="petreport",
        description="Report the running Python environment",
    )
    ap.add_argument(
        "--json",
        action="store_true",
        help="Print JSON report",
    )
    ap.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging on stderr",
    )

    args = ap.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)

    report = EnvironmentReport.from_environment(describe_current_interpreter())

    if args.json:
        print(to_json(report))
    else:
        print_report(report)
    return 0


if __name__ == "__main__":
    sys.exit(main())
