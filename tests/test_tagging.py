import logging
import sys
import unittest
from pathlib import Path
from unittest.mock import patch

# Ensure src/ is on sys.path so we can import the package without installation
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from phototagger.errors import PartialTagParseError, ResponseShapeError  # noqa: E402
from phototagger.resources.tagging import Tagging  # noqa: E402
from phototagger.resources.tagging_types import _normalize_tags, _parse_tagging_response  # noqa: E402
from phototagger.router import FetchTags  # noqa: E402


logging.basicConfig(
    level=logging.WARNING,
    format="%(levelname)s:%(name)s:%(message)s",
    stream=sys.stdout,
    force=True,
)


class DummyClient:
    def __init__(self) -> None:
        self._logger = logging.getLogger("phototagger.tests")
        self.raise_on_error = False

    def request(self, request, body=None, timeout=None, raise_on_error=None):
        return {}


class TaggingTests(unittest.TestCase):
    def setUp(self) -> None:
        self.tagging = Tagging(DummyClient())  # type: ignore[arg-type]

    def test_get_invalid_content_id_warn(self):
        with patch.object(self.tagging, "_get") as mocked_get:
            self.assertIsNone(self.tagging.get(""))
            self.assertIsNone(self.tagging.get(None))  # type: ignore[arg-type]
        mocked_get.assert_not_called()

    def test_get_invalid_content_id_strict(self):
        with self.assertRaises(ValueError):
            self.tagging.get("  ", validation="strict")

    def test_get_success_preserves_order(self):
        response = {"results": [{"image": "abc", "tags": [{"tag": "cat", "confidence": 80.1}, {"tag": "pet"}]}]}
        with patch.object(self.tagging, "_get", return_value=response) as mocked_get:
            self.assertEqual(self.tagging.get("abc"), ["cat", "pet"])
        self.assertEqual(mocked_get.call_args.args[0], FetchTags("abc"))

    def test_get_skips_entries_without_tag(self):
        response = {"results": [{"tags": [{"tag": "cat"}, {"confidence": 0.9}]}]}
        with patch.object(self.tagging, "_get", return_value=response):
            self.assertEqual(self.tagging.get("abc"), ["cat"])

    def test_get_transport_failure(self):
        with patch.object(self.tagging, "_get", return_value=None):
            self.assertIsNone(self.tagging.get("abc"))

    def test_get_missing_results(self):
        with patch.object(self.tagging, "_get", return_value={"results": []}):
            self.assertIsNone(self.tagging.get("abc"))

    def test_get_bad_shape_raises_when_enabled(self):
        with patch.object(self.tagging, "_get", return_value={"results": [{}]}):
            with self.assertRaises(ResponseShapeError):
                self.tagging.get("abc", raise_on_error=True)

    def test_normalize_tags_collects_dropped(self):
        tags, errors = _normalize_tags([{"tag": "a"}, "junk", {"tag": 3}, {"tag": "b"}])
        self.assertEqual(tags, ["a", "b"])
        self.assertEqual([error.index for error in errors.dropped], [1, 2])
        self.assertTrue(all(isinstance(error, PartialTagParseError) for error in errors.dropped))

    def test_parse_tagging_response_shapes(self):
        bad_payloads = [
            [],
            {},
            {"results": {}},
            {"results": []},
            {"results": ["x"]},
            {"results": [{"tags": "cat"}]},
        ]
        for payload in bad_payloads:
            with self.subTest(payload=payload):
                with self.assertRaises(ResponseShapeError):
                    _parse_tagging_response(payload)

    def test_parse_tagging_response_empty_tags(self):
        tags, errors = _parse_tagging_response({"results": [{"tags": []}]})
        self.assertEqual(tags, [])
        self.assertEqual(errors.dropped, [])


if __name__ == "__main__":
    unittest.main()
