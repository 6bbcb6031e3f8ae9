"""Create constraints and load the sample movie graph."""

from __future__ import annotations

import asyncio

from moviegraph.graph_db.seed import seed
from moviegraph.utils.logging import setup_logging

if __name__ == "__main__":
    setup_logging(log_level="INFO", log_format="console")
    asyncio.run(seed())
