#!/usr/bin/env python3
"""
Matchmaker API Server — entrypoint for uvicorn matchmaker_server.server:app.

For uvicorn matchmaker_server:app use matchmaker_server/__init__.py.
"""

import logging

from .app import app


def main() -> None:
    import uvicorn

    from .config import get_config

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    config = get_config()
    uvicorn.run(app, host=config.host, port=config.port)


if __name__ == "__main__":
    main()
