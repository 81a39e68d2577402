"""
Entry point for running the application with `python -m set_ingestor_api`.
"""
import os

import uvicorn

if __name__ == "__main__":
    uvicorn.run(
        "set_ingestor_api.main:app",
        host="0.0.0.0",
        port=int(os.getenv("PORT", "8004")),
    )
