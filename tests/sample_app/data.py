"""Data components served from the data endpoint."""

from __future__ import annotations

import json


class ClockData:
    def render_data(self) -> str:
        return json.dumps({"time": "12:00"})


class BrokenData:
    def render_data(self) -> str:
        raise ValueError("no data today")
