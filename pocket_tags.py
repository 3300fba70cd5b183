#!/usr/bin/env python3
"""
Pocket Tag Summary Tool
Prints how many saved items carry each tag, optionally saving the result as JSON.
"""

import sys
import logging
from dataclasses import replace
from typing import List, Optional

from config import create_client, load_settings
from errors import PocketError
from models import TagSummary
from storage import save_tag_summaries

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)


def sort_tags(tags: List[TagSummary], order: str = "count") -> List[TagSummary]:
    if order == "name":
        return sorted(tags, key=lambda t: t.tag)
    return sorted(tags, key=lambda t: (-t.item_count, t.tag))


def summarize_tags(
    access_token: Optional[str] = None,
    output: Optional[str] = None,
    order: str = "count",
) -> int:
    """
    Fetch the tag summary and print it. Returns the process exit status.
    """
    settings = load_settings()
    if access_token:
        settings = replace(settings, access_token=access_token)
    if not settings.has_credentials():
        logger.error("Missing POCKET_CONSUMER_KEY or access token. Exiting.")
        return 1

    client = create_client(settings)
    logger.info("🔍 Fetching saved items and counting tags...")
    try:
        tags = client.get_tags_with_article_count(settings.access_token)
    except PocketError as e:
        logger.error(f"❌ Error fetching tags: {e}")
        return 1

    tags = sort_tags(tags, order)
    for tag in tags:
        print(f"{tag.tag}\t{tag.item_count}")
    logger.info(f"✅ {len(tags):,} tags found")

    if output:
        if not save_tag_summaries(tags, output):
            logger.error(f"❌ Failed to save tag summary to {output}")
            return 1
        logger.info(f"💾 Tag summary saved: {output}")
    return 0


def main(argv: Optional[List[str]] = None):
    import argparse
    parser = argparse.ArgumentParser(description="Pocket Tag Summary Tool")
    parser.add_argument("--access-token", help="Access token (default: POCKET_ACCESS_TOKEN)")
    parser.add_argument("--output", "-o", help="Also write the summary to this JSON file")
    parser.add_argument("--sort", choices=["count", "name"], default="count",
                        help="Sort order (default: count)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    args = parser.parse_args(argv)
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)
    sys.exit(summarize_tags(access_token=args.access_token, output=args.output, order=args.sort))


if __name__ == "__main__":
    main()
