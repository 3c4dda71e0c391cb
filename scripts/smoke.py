# scripts/smoke.py
"""
Live smoke test against the real STANDS4 and dictionary APIs.

Usage
-----
1. Default interests:
    $ python scripts/smoke.py

2. Custom interests:
    $ python scripts/smoke.py --prefs "jazz, space travel"

Requires STANDS4_UID / STANDS4_API_KEY in the environment or `.env`.
Each run spends at least one request of the daily STANDS4 allowance.
"""

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

env_path = Path(".env")
if env_path.exists():
    load_dotenv(env_path)
    print("✅ Loaded .env file")
else:
    print("⚠️  Warning: No .env file found! Quote lookups will fail without credentials.")

from stickywords.pipelines.service import WordService  # noqa: E402

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)

DEFAULT_PREFS = "adventure, mystery"


def main() -> None:
    """Fetch one word card and one curated word, then print usage."""
    parser = argparse.ArgumentParser(description="Run Sticky Words Smoke Test")
    parser.add_argument("--prefs", "-p", type=str, default=DEFAULT_PREFS, help="Interests")
    args = parser.parse_args()

    service = WordService.from_settings()
    print(f"\n🔎 Searching quotes for: {args.prefs!r}")

    result = service.word_card(args.prefs)
    if result.is_err():
        error = result.unwrap_err()
        print(f"\n❌ {error.kind}: {error.message}")
    else:
        card = result.unwrap()
        print("\n" + "=" * 60)
        print(f"📝 Word: {card.word}")
        print(f"📖 Definition: {card.definition or '(none)'}")
        print(f'💬 Quote: "{card.quote}"')
        print(f"🎬 {card.character} / {card.title}")
        print("=" * 60)

    curated = service.curated_word()
    print(f"\n📚 Curated: {curated.word} ({curated.category})")
    print(f"   Source: {curated.source}")
    if curated.script_context is not None:
        print(f"   Script: {curated.script_context.title} by {curated.script_context.writer}")

    status = service.status()
    print(f"\n📊 Requests used today: {status.request_count}/{status.daily_limit}")


if __name__ == "__main__":
    main()
