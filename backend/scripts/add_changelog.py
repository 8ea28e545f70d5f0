"""Prepend a changelog entry to the site content and save it.

Usage:
  python scripts/add_changelog.py --version 1.2.0 --title "Gallery" \
      --change "Added photo gallery" --change "Fixed contact visibility"
"""
import argparse
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from portfolio.config import settings
from portfolio.database import Base, SessionLocal, engine
import portfolio.models  # noqa: F401 - registers all models
from portfolio.services.content_editor import ContentEditor, EditorValidationError
from portfolio.services.content_store import ContentStore, ContentStoreError


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--version", required=True)
    parser.add_argument("--title", required=True)
    parser.add_argument("--change", action="append", default=[], help="Repeat for each change line")
    parser.add_argument("--date", default=None, help="ISO date, defaults to today")
    args = parser.parse_args()

    Base.metadata.create_all(bind=engine)
    editor = ContentEditor(ContentStore(SessionLocal, document_key=settings.CONTENT_DOCUMENT_KEY))
    editor.load()
    try:
        entry = editor.add_changelog_entry(args.version, args.title, args.change, entry_date=args.date)
    except EditorValidationError as exc:
        print(f"Rejected: {exc}")
        sys.exit(1)

    try:
        editor.save(updated_by="add_changelog")
    except ContentStoreError as exc:
        print(f"{editor.message} ({exc})")
        sys.exit(1)
    print(f"Added v{entry.version} ({entry.date}): {entry.title}")


if __name__ == "__main__":
    main()
