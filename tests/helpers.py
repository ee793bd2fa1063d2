"""
Shared helpers for the coin ranking tests.
"""

from pathlib import Path

from coin_ranking.network.request import PreparedRequest
from coin_ranking.network.transport import TransportResponse

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def load_fixture(name: str) -> bytes:
    """Read a canned JSON response from tests/fixtures."""
    return (FIXTURES_DIR / f"{name}.json").read_bytes()


class ScriptedTransport:
    """Transport that replays scripted responses and records requests.

    Each script entry is a TransportResponse to return or an exception to
    raise. The last entry repeats once the script is exhausted.
    """

    def __init__(self, *script):
        self.script = list(script)
        self.requests: list[PreparedRequest] = []

    @classmethod
    def ok(cls, fixture: str) -> "ScriptedTransport":
        return cls(TransportResponse(status=200, body=load_fixture(fixture)))

    async def send(self, request: PreparedRequest):
        self.requests.append(request)
        entry = self.script.pop(0) if len(self.script) > 1 else self.script[0]
        if isinstance(entry, BaseException):
            raise entry
        return entry
