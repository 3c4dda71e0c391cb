"""
ASGI entry point for the Sticky Words API.

`.env` is loaded before the factory runs so that `load_settings()` sees the
STANDS4 credentials on first use.

Usage
-----
    $ stickywords-api                                   # reload-enabled dev server
    $ uvicorn stickywords.api.server:app --port 8080    # any ASGI server
"""

import os
from pathlib import Path

import uvicorn
from dotenv import load_dotenv

from stickywords.api.app import create_app

load_dotenv(dotenv_path=Path(".env"))

app = create_app()

CREDENTIAL_VARS = ("STANDS4_UID", "STANDS4_API_KEY")


def _describe(var_name: str) -> str:
    value = os.getenv(var_name, "").strip()
    if not value:
        return "❌ Missing"
    return f"✅ Loaded ({value[:4]}...)"


def main() -> None:
    """Print a credential check, then serve the app with auto-reload."""
    print(f"{'[ STANDS4 credentials ]':=^60}")
    for var_name in CREDENTIAL_VARS:
        print(f"{var_name:<20} : {_describe(var_name)}")
    print("=" * 60)

    uvicorn.run(
        "stickywords.api.server:app",
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8000")),
        reload=True,
        log_level="info",
    )


if __name__ == "__main__":
    main()
