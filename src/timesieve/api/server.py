"""
ASGI entry point for the TimeSieve API.

Usage
-----
    $ python -m timesieve.api.server
    $ uvicorn timesieve.api.server:app --reload
"""

from pathlib import Path

import uvicorn
from dotenv import load_dotenv

from timesieve.api.app import create_app

# Load .env before the factory runs so settings see it.
load_dotenv(dotenv_path=Path(".env"))

app = create_app()


def main() -> None:
    """Run the API server locally for development."""
    uvicorn.run(
        "timesieve.api.server:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level="info",
    )


if __name__ == "__main__":
    main()
