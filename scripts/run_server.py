"""Entrypoint for launching the line chart FastAPI server."""
from __future__ import annotations

import uvicorn

from linechart.log import setup_logging


def main() -> None:
    setup_logging("INFO")
    uvicorn.run("linechart.server.app:app", host="0.0.0.0", port=8000, reload=False)


if __name__ == "__main__":
    main()
