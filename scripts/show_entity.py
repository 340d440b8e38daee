#!/usr/bin/env python3
"""
Print an entity with its claims rendered the way the app displays them.

Usage:
    python scripts/show_entity.py Q42
    python scripts/show_entity.py Q42 --language de
    python scripts/show_entity.py --random
"""

import argparse
import asyncio
import sys

from wikidata_lite.api import WikidataClient
from wikidata_lite.config import configure_logging
from wikidata_lite.formatting import display_sentinel
from wikidata_lite.labels import LabelCache
from wikidata_lite.sessions import EntityLoadState, EntitySession


def print_entity(session: EntitySession, language: str) -> None:
    state = session.state
    entity = state.entity

    print(f"{entity.get_label(language)} ({entity.id})")
    description = entity.get_description(language)
    if description:
        print(f"  {description}")
    aliases = entity.get_aliases(language)
    if aliases:
        print(f"  also known as: {', '.join(aliases)}")
    print()

    for property_id, claims in entity.sorted_claims():
        print(f"{state.property_labels.get(property_id, property_id)} ({property_id})")
        for claim in claims:
            text = session.format_claim_value(claim)
            if not claim.mainsnak.has_value:
                text = display_sentinel(text)
            print(f"  - {text} [{claim.rank.value}]")
            for qualifier in claim.iter_qualifiers():
                print(f"      {state.property_labels.get(qualifier.property, qualifier.property)}: "
                      f"{session.format_snak(qualifier)}")

    print()
    print(f"{entity.claim_count()} statements, {len(entity.sitelinks)} sitelinks")


async def show(entity_id: str | None, language: str) -> int:
    client = WikidataClient()
    session = EntitySession(client, LabelCache(client, language=language), language=language)
    try:
        if entity_id:
            await session.load_entity(entity_id)
        else:
            await session.load_random_entity()

        state = session.state
        if state.load_state == EntityLoadState.NOT_FOUND:
            print(f"❌ Entity {state.entity_id} does not exist")
            return 1
        if state.load_state == EntityLoadState.FAILED:
            print(f"❌ {state.error}")
            return 1

        print_entity(session, language)
        return 0
    finally:
        await session.aclose()
        client.close()


def main():
    parser = argparse.ArgumentParser(description="Show a Wikidata entity")
    parser.add_argument("entity_id", nargs="?", help="Item or property id, e.g. Q42")
    parser.add_argument("--random", action="store_true", help="Show a random item")
    parser.add_argument("--language", default="en")
    parser.add_argument("--log-level", default=None)
    args = parser.parse_args()

    if not args.entity_id and not args.random:
        parser.error("give an entity id or --random")

    configure_logging(args.log_level)
    sys.exit(asyncio.run(show(args.entity_id, args.language)))


if __name__ == "__main__":
    main()
