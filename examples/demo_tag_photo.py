"""CLI demo that uploads a JPEG and prints the tags Imagga returns.

Run with the virtual environment activated::

    python examples/demo_tag_photo.py path/to/photo.jpg

Set ``IMAGGA_API_KEY`` / ``IMAGGA_API_SECRET`` (or ``IMAGGA_AUTHORIZATION``)
before running. ``IMAGGA_BASE_URL`` overrides the default service root.
"""

import logging
import os
import sys

from tqdm import tqdm

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
SRC_DIR = os.path.join(PROJECT_ROOT, "src")
if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)

from phototagger import PhotoTagger

logging.basicConfig(level=logging.INFO)


def main() -> None:
    if len(sys.argv) != 2:
        print("usage: demo_tag_photo.py PHOTO.jpg")
        return

    with open(sys.argv[1], "rb") as handle:
        image = handle.read()

    with PhotoTagger() as tagger, tqdm(total=100, desc="Uploading", unit="%") as pbar:
        def on_progress(fraction: float) -> None:
            pbar.update(round(fraction * 100) - pbar.n)

        outcome = tagger.upload_and_tag(image, on_progress=on_progress).result()

    if outcome.status == "failed":
        print(f"Tagging failed ({outcome.reason}): {outcome.detail}")
        return

    print(f"\nContent ID: {outcome.content_id}")
    print(f"{len(outcome.tags)} tags:")
    for tag in outcome.tags:
        print(f"  - {tag}")


if __name__ == "__main__":
    main()
