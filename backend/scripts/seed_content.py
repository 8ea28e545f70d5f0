"""Write the default site content document if it does not exist yet.

Usage:
  python scripts/seed_content.py            # create only when missing
  python scripts/seed_content.py --force    # overwrite every section with defaults
"""
import argparse
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from portfolio.config import settings
from portfolio.database import Base, SessionLocal, engine
from portfolio.models.site_document import SiteDocument
import portfolio.models  # noqa: F401 - registers all models
from portfolio.services.content_store import ContentStore
from portfolio.services.defaults import get_default


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--force", action="store_true", help="Overwrite existing sections with defaults")
    args = parser.parse_args()

    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        exists = db.get(SiteDocument, settings.CONTENT_DOCUMENT_KEY) is not None
    finally:
        db.close()

    if exists and not args.force:
        print(f"Document '{settings.CONTENT_DOCUMENT_KEY}' already exists, nothing to do.")
        return

    store = ContentStore(SessionLocal, document_key=settings.CONTENT_DOCUMENT_KEY)
    store.save(get_default(), updated_by="seed_content")
    print(f"Default content written to '{settings.CONTENT_DOCUMENT_KEY}'.")


if __name__ == "__main__":
    main()
