import logging
import sys
import unittest
from pathlib import Path

# Ensure src/ is on sys.path so we can import the package without installation
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from phototagger.resources.colors import Colors  # noqa: E402


class DummyClient:
    def __init__(self) -> None:
        self._logger = logging.getLogger("phototagger.tests")
        self.calls = []

    def request(self, request, body=None, timeout=None, raise_on_error=None):
        self.calls.append(request)
        return {}


class ColorsTests(unittest.TestCase):
    def test_get_is_empty_and_sends_nothing(self):
        client = DummyClient()
        colors = Colors(client)  # type: ignore[arg-type]
        self.assertEqual(colors.get("abc123"), [])
        self.assertEqual(client.calls, [])
