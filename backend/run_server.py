#!/usr/bin/env python3
"""
Run the Dossier Directory API

Loads .env from the project root, configures logging, and serves the
FastAPI app with uvicorn. Without Supabase or OpenAI credentials the
directory still starts in demo mode with the bundled dossiers.
"""
import os
from pathlib import Path

# Load .env from project root (one level up from backend/)
from dotenv import load_dotenv
env_path = Path(__file__).parent.parent / '.env'
load_dotenv(env_path)

import logging
import uvicorn

if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    host = os.getenv('HOST', '0.0.0.0')
    port = int(os.getenv('PORT', '8000'))

    print("📚 Starting Dossier Directory API...")
    print(f"   Listening on: http://{host}:{port}")
    print("   Press Ctrl+C to stop\n")

    uvicorn.run("main:app", host=host, port=port)
