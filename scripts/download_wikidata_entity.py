#!/usr/bin/env python3
"""
Download wbgetentities responses from Wikidata for use as test fixtures.

Usage:
    python scripts/download_wikidata_entity.py Q42
    python scripts/download_wikidata_entity.py Q42 P31 Q5
"""

import json
import sys
from pathlib import Path

from wikidata_lite.api import WikidataClient
from wikidata_lite.config import configure_logging
from wikidata_lite.errors import WikidataError

OUTPUT_DIR = Path(__file__).parent.parent / "test_data" / "json" / "entities"


def download_entity(client: WikidataClient, entity_id: str, output_dir: Path) -> None:
    """Save the raw wbgetentities response for one entity"""
    print(f"Downloading {entity_id}...")
    body = client.get_entities([entity_id])

    output_path = output_dir / f"{entity_id}.json"
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(body, f, indent=2, ensure_ascii=False)

    print(f"Saved to {output_path}")


def main():
    if len(sys.argv) < 2:
        print("Usage: python download_wikidata_entity.py <entity_id> [entity_id2] ...")
        print("Example: python download_wikidata_entity.py Q42")
        sys.exit(1)

    configure_logging()
    OUTPUT_DIR.mkdir(parents=True, exist_ok=True)

    client = WikidataClient()
    try:
        for entity_id in sys.argv[1:]:
            try:
                download_entity(client, entity_id.strip().upper(), OUTPUT_DIR)
            except WikidataError as e:
                print(f"\n❌ Error downloading {entity_id}: {e.message}")
                sys.exit(1)
    finally:
        client.close()

    print(f"\n✅ Downloaded {', '.join(sys.argv[1:])}")


if __name__ == "__main__":
    main()
