import os

import uvicorn

from location_provider.logger import log_config


def main() -> None:
    """Serve the location provider API with uvicorn.

    HOST and PORT override the local defaults; RELOAD=1 enables auto-reload.
    """
    uvicorn.run(
        "location_provider.main:app",
        host=os.getenv("HOST", "127.0.0.1"),
        port=int(os.getenv("PORT", "8000")),
        reload=os.getenv("RELOAD") == "1",
        log_config=log_config,
    )


if __name__ == "__main__":
    main()
