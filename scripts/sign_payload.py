#!/usr/bin/env python3
"""
Webhook Payload Signer

Prints the X-Encrypted-Timestamp and X-Payload-Checksum headers a Jenkins job
must send along with a payload file, and optionally posts it to a receiver.

Usage:
    python scripts/sign_payload.py payload.json
    python scripts/sign_payload.py payload.json --post http://localhost:3000/jenkins-webhook

The checksum covers the file's exact bytes, so send the file unmodified
(e.g. curl --data-binary @payload.json).
"""

import argparse
import sys
from pathlib import Path

# Add parent directory to path so we can import from app
sys.path.insert(0, str(Path(__file__).parent.parent))

import httpx
from dotenv import load_dotenv

from app.pipeline.freshness import TIMESTAMP_HEADER, encode_timestamp, now_ms
from app.pipeline.integrity import CHECKSUM_HEADER, compute_checksum

# Load environment variables
load_dotenv()


def signed_headers(body: bytes, timestamp_ms: int | None = None) -> dict[str, str]:
    if timestamp_ms is None:
        timestamp_ms = now_ms()
    return {
        TIMESTAMP_HEADER: encode_timestamp(timestamp_ms),
        CHECKSUM_HEADER: compute_checksum(body),
        "Content-Type": "application/json",
    }


def main():
    parser = argparse.ArgumentParser(description="Sign a Jenkins webhook payload")
    parser.add_argument("payload", type=Path, help="JSON file to sign")
    parser.add_argument("--post", metavar="URL", help="POST the signed payload to this receiver URL")
    args = parser.parse_args()

    body = args.payload.read_bytes()
    headers = signed_headers(body)

    for name, value in headers.items():
        print(f"{name}: {value}")

    if not args.post:
        return

    print()
    print(f"Posting to {args.post}...")
    try:
        response = httpx.post(args.post, content=body, headers=headers, timeout=30.0)
    except httpx.HTTPError as e:
        print("ERROR:", str(e))
        sys.exit(1)

    print(f"{response.status_code}: {response.text}")
    if response.status_code != 200:
        sys.exit(1)


if __name__ == "__main__":
    main()
