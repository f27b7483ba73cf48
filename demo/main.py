"""Main entry point for the demo site."""
import asyncio
import logging
from pathlib import Path

import uvicorn

from favlink.runtime.app import FavlinkApp


def main():
    """Run the demo site."""
    content_dir = Path(__file__).parent / "content"

    logging.basicConfig(level=logging.DEBUG)
    app = FavlinkApp(str(content_dir), debug=True)

    config = uvicorn.Config(app, host="127.0.0.1", port=3000)
    server = uvicorn.Server(config)
    asyncio.run(server.serve())


if __name__ == "__main__":
    main()
