#!/usr/bin/env python3
"""Start the Crossed Wires API server."""

import logging

import uvicorn

if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(
        "crossedwires.api.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        reload_dirs=["crossedwires"],
    )
