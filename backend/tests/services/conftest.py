"""Service test fixtures: a recording executor double.

Invariants:
    - RecordingExecutor returns queued results in order and records every call
    - An empty queue yields an empty row list
"""

import pytest


class RecordingExecutor:
    def __init__(self):
        self.calls: list[tuple[str, list]] = []
        self.results: list[list[dict]] = []

    async def execute(self, statement, params=()):
        self.calls.append((statement, list(params)))
        return self.results.pop(0) if self.results else []


@pytest.fixture
def recording_executor():
    return RecordingExecutor()
