from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

from petreport.core.report import EnvironmentReport

log = logging.getLogger(__name__)


def write_report(report: EnvironmentReport, stream: TextIO) -> None:
    """Write the textual form line by line.

    Diagnostic output only: a line the sink rejects is dropped and the rest
    are still attempted.
    """
    for line in report.lines():
        try:
            stream.write(f"{line}\n")
        except (OSError, ValueError) as e:
            log.debug("dropped report line %r: %s", line, e)


def print_report(report: EnvironmentReport, stream: Optional[TextIO] = None) -> None:
    write_report(report, sys.stdout if stream is None else stream)
