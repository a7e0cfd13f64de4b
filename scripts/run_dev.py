"""
Development server launcher.

Loads .env file and runs FastAPI with uvicorn in reload mode.

Usage:
    python scripts/run_dev.py
"""

import os
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Load .env file
from dotenv import load_dotenv

load_dotenv()

import uvicorn

if __name__ == "__main__":
    port = int(os.environ.get("PORT", "3000"))

    print("=" * 60)
    print("Gym Tracker Development Server")
    print("=" * 60)
    print()
    print("Starting FastAPI application...")
    print(f"API: http://localhost:{port}/api/v1/sessions")
    print(f"Docs: http://localhost:{port}/docs")
    print()
    print("Press Ctrl+C to stop")
    print("=" * 60)

    uvicorn.run("gymlog.main:app", host="0.0.0.0", port=port, reload=True, log_level="info")
