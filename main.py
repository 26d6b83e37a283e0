"""Entry point for running the NiceGUI line chart page."""

from linechart.app import run
from linechart.log import setup_logging


if __name__ in {"__main__", "__mp_main__"}:
    setup_logging("INFO")
    run(reload=False, host="0.0.0.0", port=8080, title="Line Chart")
