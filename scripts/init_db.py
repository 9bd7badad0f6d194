#!/usr/bin/env python
"""
Script untuk inisialisasi database UserAuth API.
Membuat semua tabel yang diperlukan.
Usage: python scripts/init_db.py
"""

import asyncio
import sys
from pathlib import Path
import logging

# Add parent directory to path
sys.path.append(str(Path(__file__).parent.parent))

from app.db.session import init_db, close_db

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


async def main():
    """Create tables."""
    try:
        await init_db()
        logger.info("Database tables created")
    finally:
        await close_db()


if __name__ == "__main__":
    asyncio.run(main())
