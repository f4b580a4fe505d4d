#!/usr/bin/env python3
"""
Register an uploaded music track in the document store.

The API has no music upload endpoint. After a file has been uploaded to
storage, this command records it in the ``music`` collection so readers
can pick it.

Usage:
    STORE_BACKEND=firestore python cli/add_music.py "Canção de Ninar" https://cdn.example.com/ninar.mp3
    python cli/add_music.py "Chuva" https://cdn.example.com/chuva.mp3 --backend firestore \
        --uploaded-at 1700000000000
"""

import argparse
import asyncio
import sys
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from contos.api import config  # noqa: E402
from contos.api.models.requests import MusicInput  # noqa: E402
from contos.api.services.clock import epoch_ms  # noqa: E402
from contos.api.store import MUSIC, DocumentStore, create_store  # noqa: E402


async def add_music(
    store: DocumentStore, name: str, url: str, uploaded_at: Optional[int] = None
) -> str:
    """Validate and write one music record. Returns the new document id."""
    track = MusicInput(name=name, url=url)
    data = {
        "name": track.name,
        "url": str(track.url),
        "uploadedAt": uploaded_at if uploaded_at is not None else epoch_ms(),
    }
    return await store.add(MUSIC, data)


async def run(backend: str, name: str, url: str, uploaded_at: Optional[int]) -> str:
    store = create_store(backend)
    try:
        return await add_music(store, name, url, uploaded_at)
    finally:
        await store.close()


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Register an uploaded music track",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("name", type=str, help="Display name of the track")
    parser.add_argument("url", type=str, help="Absolute URL of the uploaded audio file")
    parser.add_argument(
        "--uploaded-at",
        type=int,
        default=None,
        help="Upload time in epoch milliseconds (default: now)",
    )
    parser.add_argument(
        "--backend",
        choices=["firestore"],
        default=None,
        help="Document store backend (default: STORE_BACKEND from the environment)",
    )
    args = parser.parse_args(argv)

    backend = (args.backend or config.STORE_BACKEND).lower()
    if backend == "memory":
        # A process-local store would drop the record on exit
        print(
            "The memory backend does not persist; set STORE_BACKEND=firestore "
            "or pass --backend firestore",
            file=sys.stderr,
        )
        return 2

    try:
        music_id = asyncio.run(run(backend, args.name, args.url, args.uploaded_at))
    except ValidationError as e:
        for error in e.errors():
            field = ".".join(str(part) for part in error["loc"])
            print(f"Invalid {field}: {error['msg']}", file=sys.stderr)
        return 1

    print(music_id)
    return 0


if __name__ == "__main__":
    sys.exit(main())
