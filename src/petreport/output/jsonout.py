from __future__ import annotations

import json
from typing import Iterable, Union

from petreport.core.report import EnvironmentReport


def to_json(reports: Union[EnvironmentReport, Iterable[EnvironmentReport]]) -> str:
    if isinstance(reports, EnvironmentReport):
        payload = reports.to_dict()
    else:
        payload = [r.to_dict() for r in reports]
    return json.dumps(payload, indent=2, ensure_ascii=False)
