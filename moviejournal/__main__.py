"""
Movie Journal Entry Point

Connectivity and schema check for a deployment: connects with the
configured DATABASE_URL, creates missing tables, applies column
migrations and prints one status line.

Usage:
======
    DATABASE_URL=mysql+pymysql://journal:secret@db:3306/moviejournal python -m moviejournal
"""

import sys

from sqlalchemy.engine import make_url

from moviejournal.config.settings import settings
from moviejournal.shared.core.exceptions import StorageError
from moviejournal.shared.core.logging import logger
from moviejournal.shared.db.session import get_database


def main() -> int:
    database = get_database()
    target = make_url(database.url).render_as_string(hide_password=True)

    try:
        database.check_connection()
        database.ensure_schema()
    except StorageError as e:
        logger.error("Database check failed", database=target, error_code=e.error_code, error=e.message)
        print(f"{settings.APP_NAME}: cannot use database {target} ({e.message})")
        return 1
    finally:
        database.dispose()

    logger.info("Database ready", database=target, environment=settings.APP_ENV)
    print(f"{settings.APP_NAME}: database {target} is ready")
    return 0


if __name__ == "__main__":
    sys.exit(main())
