"""Reseed the book catalog from the fixed dataset.

Deletes every book in the configured database and inserts the seed dataset
in a single transaction. The same reseed runs at startup when RESET_DB is set;
this script does it on demand.

WARNING: This is destructive! All existing books will be replaced.

Usage:
    python scripts/seed_books.py
    python scripts/seed_books.py --data data/books.json --yes
"""

import argparse
import logging
import sys
from pathlib import Path

# Add backend directory to path to allow imports
backend_dir = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(backend_dir))

from bookish.config import get_settings
from bookish.core.database import engine
from bookish.core.errors import SeedError
from bookish.models.database import Base
from bookish.services.seed_loader import reseed_from_file

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def seed_books(data_path: Path, assume_yes: bool = False) -> int:
    """Reseed the database, asking for confirmation unless ``assume_yes``.

    Returns:
        Number of books inserted (0 if aborted)
    """
    print("=" * 70)
    print("RESEEDING BOOK CATALOG")
    print("=" * 70)
    print(f"\nDataset: {data_path}")

    if not assume_yes:
        print("\n⚠️  WARNING: This will delete ALL books from the database!")
        response = input("Are you sure you want to continue? (yes/no): ")
        if response.lower() != "yes":
            print("\n❌ Aborted. No changes made.")
            return 0

    Base.metadata.create_all(bind=engine)
    inserted = reseed_from_file(data_path)

    print("\n" + "=" * 70)
    print("SEEDING COMPLETE")
    print("=" * 70)
    print(f"✅ Inserted: {inserted} books")
    print("=" * 70)
    return inserted


def main() -> int:
    parser = argparse.ArgumentParser(description="Reseed the book catalog")
    parser.add_argument(
        "--data",
        type=Path,
        default=get_settings().seed_data_path,
        help="Path to the seed dataset (JSON array of books)",
    )
    parser.add_argument("--yes", action="store_true", help="Skip the confirmation prompt")
    args = parser.parse_args()

    try:
        seed_books(args.data, assume_yes=args.yes)
    except SeedError as e:
        logger.error(f"Reseed failed: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
