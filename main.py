#!/usr/bin/env python3
"""
Entry point for the Calculator application.

    python main.py

Settings come from CALC_* environment variables (see backend/config.py),
e.g. CALC_LOG_LEVEL=DEBUG python main.py
"""
import logging
import sys
from pathlib import Path

# Ensure the repo root is on sys.path so the backend/frontend packages import
ROOT = Path(__file__).resolve().parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.config import CalculatorConfig
from frontend.gui import CalculatorGUI


def main():
    config = CalculatorConfig.from_env()
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = CalculatorGUI(config)
    app.mainloop()


if __name__ == "__main__":
    main()
