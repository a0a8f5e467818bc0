"""Entry point for serving the Fitness Events API.

Intended to be executed from the project root, for example under
Docker or a process manager where you only specify a single Python
file to run.  Configuration (database path, API key, Razorpay and
admin credentials) is read from a ``.env`` file in the same directory
and from the environment.

Usage:
    python run.py
"""
import asyncio
import logging
import os

from dotenv import load_dotenv
from uvicorn import Config, Server


async def run_api() -> None:
    """Start the API using Uvicorn.

    Host and port are read from environment variables ``API_HOST`` and
    ``API_PORT``.  Defaults are ``0.0.0.0`` and ``8000``.
    """
    # Imported here so that ``.env`` is loaded before settings are read.
    from fitness_events_api.app.main import app

    host = os.getenv("API_HOST", "0.0.0.0")
    port = int(os.getenv("API_PORT", "8000"))
    config = Config(app=app, host=host, port=port, reload=False, log_level="info")
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    load_dotenv()
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        logging.getLogger(__name__).info("API stopped")
