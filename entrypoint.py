"""Backend entrypoint: starts uvicorn with host and port from env."""
import os
import uvicorn

from networth.main import app


def main() -> None:
    host = os.environ.get("NETWORTH_HOST", "127.0.0.1")
    port = int(os.environ.get("NETWORTH_PORT", "8001"))
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    main()
