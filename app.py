"""Development entry point: `python app.py` or `flask --app app run`."""
from __future__ import annotations

import os
import sys
from pathlib import Path

SRC = Path(__file__).resolve().parent / "src" / "school_dashboard"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from school_dashboard.main import create_app

app = create_app()

if __name__ == "__main__":
    app.run(host=os.getenv("HOST", "127.0.0.1"), port=int(os.getenv("PORT", "5000")), debug=app.config["DEBUG"])
