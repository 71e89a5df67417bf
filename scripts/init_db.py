"""
Database initialization script.

Creates the tables on the database configured by ``DATABASE_URL``.

Usage:
    python scripts/init_db.py
"""

import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dotenv import load_dotenv

load_dotenv()

from sqlalchemy.exc import SQLAlchemyError

from app.core.config import settings
from app.db.init_db import init_db

if __name__ == "__main__":
    logging.basicConfig(level=settings.LOG_LEVEL, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    print("=" * 50)
    print("LiftPlan Database Initialization")
    print("=" * 50)

    try:
        init_db()
    except SQLAlchemyError as e:
        print(f"ERROR: Database initialization failed: {e}")
        sys.exit(1)

    print("SUCCESS: Database initialized!")
