import sys
import unittest
from pathlib import Path

# Ensure src/ is on sys.path so we can import the package without installation
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from phototagger.multipart import MultipartUpload  # noqa: E402


class MultipartUploadTests(unittest.TestCase):
    def test_body_layout(self):
        upload = MultipartUpload(b"\xff\xd8jpeg-bytes", boundary="testboundary")
        body = upload.getvalue()
        self.assertEqual(upload.content_type, "multipart/form-data; boundary=testboundary")
        self.assertIn(b'name="imagefile"', body)
        self.assertIn(b'filename="image.jpg"', body)
        self.assertIn(b"Content-Type: image/jpeg", body)
        self.assertIn(b"\xff\xd8jpeg-bytes", body)
        self.assertTrue(body.endswith(b"--testboundary--\r\n"))
        self.assertEqual(len(upload), len(body))

    def test_read_all(self):
        upload = MultipartUpload(b"abc")
        self.assertEqual(upload.read(), upload.getvalue())
        self.assertEqual(upload.read(), b"")
        self.assertEqual(upload.bytes_read, len(upload))

    def test_read_in_chunks_reports_progress(self):
        fractions = []
        upload = MultipartUpload(b"x" * 500, progress=fractions.append)
        chunks = []
        while True:
            chunk = upload.read(64)
            if not chunk:
                break
            chunks.append(chunk)
        self.assertEqual(b"".join(chunks), upload.getvalue())
        self.assertEqual(len(fractions), len(chunks))
        self.assertEqual(fractions, sorted(fractions))
        self.assertEqual(fractions[-1], 1.0)
        self.assertTrue(all(0 < value <= 1 for value in fractions))

    def test_empty_read_does_not_report(self):
        fractions = []
        upload = MultipartUpload(b"abc", progress=fractions.append)
        upload.read()
        upload.read(10)
        self.assertEqual(fractions, [1.0])

    def test_rewind(self):
        upload = MultipartUpload(b"abc")
        first = upload.read()
        upload.rewind()
        self.assertEqual(upload.bytes_read, 0)
        self.assertEqual(upload.read(), first)
