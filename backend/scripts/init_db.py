"""Create the `site_document` table that holds the portfolio content document.

Usage:
  python scripts/init_db.py

Run `scripts/seed_content.py` afterwards to write the default content.
"""
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from sqlalchemy import inspect

from portfolio.database import Base, engine
from portfolio.models.site_document import SiteDocument


def init_db(bind=None) -> list[str]:
    bind = bind if bind is not None else engine
    Base.metadata.create_all(bind=bind, tables=[SiteDocument.__table__])
    return inspect(bind).get_table_names()


if __name__ == "__main__":
    tables = init_db()
    print(f"Tables ready: {', '.join(tables)} ({engine.url.render_as_string(hide_password=True)})")
