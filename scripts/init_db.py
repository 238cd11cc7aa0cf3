#!/usr/bin/env python3
"""Create the tables and the item audit trigger without running migrations."""

import asyncio
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from warehouse_control.config import get_settings
from warehouse_control.db import create_engine, init_db


async def main() -> None:
    engine = create_engine(get_settings().database)
    try:
        await init_db(engine)
    finally:
        await engine.dispose()
    print("Database schema is ready")


if __name__ == "__main__":
    asyncio.run(main())
