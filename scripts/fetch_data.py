#!/usr/bin/env python3
"""
Download the OurAirports countries, airports and runways CSVs into the data
directory used by the airfields CLI.

Usage:
    uv run python scripts/fetch_data.py
    uv run python scripts/fetch_data.py --data-dir /tmp/ourairports
"""

import argparse
from pathlib import Path

import requests
from tqdm import tqdm

from airfields.config import DATASET_BASE_URL, DATASET_FILES, data_dir

CHUNK_SIZE = 64 * 1024


def download(url: str, dest: Path, timeout: int = 60) -> int:
    """Stream url to dest (via a .part file). Returns bytes written."""
    tmp = dest.with_suffix(dest.suffix + ".part")
    with requests.get(url, stream=True, timeout=timeout) as resp:
        resp.raise_for_status()
        total = int(resp.headers.get("content-length", 0)) or None
        written = 0
        with open(tmp, "wb") as f, tqdm(
            total=total, unit="B", unit_scale=True, desc=dest.name
        ) as bar:
            for chunk in resp.iter_content(chunk_size=CHUNK_SIZE):
                f.write(chunk)
                written += len(chunk)
                bar.update(len(chunk))
    tmp.replace(dest)
    return written


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(description="Download OurAirports CSV data")
    parser.add_argument(
        "--data-dir", type=str, default=None,
        help="Target directory (default: $AIRFIELDS_DATA_DIR or ./data)",
    )
    parser.add_argument(
        "--base-url", type=str, default=DATASET_BASE_URL,
        help=f"Dataset base URL (default: {DATASET_BASE_URL})",
    )
    args = parser.parse_args(argv)

    target = data_dir(args.data_dir)
    target.mkdir(parents=True, exist_ok=True)

    for name in DATASET_FILES:
        url = f"{args.base_url.rstrip('/')}/{name}"
        print(f"Fetching {url}...")
        size = download(url, target / name)
        print(f"Wrote {size:,} bytes to {target / name}")


if __name__ == "__main__":
    main()
