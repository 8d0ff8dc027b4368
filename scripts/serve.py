#!/usr/bin/env python3
"""Serve the Jotto web API (GET /api/grid, POST /api/guess, POST /api/puzzle)."""

import os

import uvicorn

if __name__ == "__main__":
    host = os.environ.get("JOTTO_HOST", "localhost")
    port = int(os.environ.get("JOTTO_PORT", "8000"))
    uvicorn.run(
        "jotto.main:app",
        host=host,
        port=port,
        app_dir=os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", "backend"),
    )
