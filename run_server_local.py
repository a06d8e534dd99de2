"""
Run the Resume Tailor API locally.

`python run_server_local.py` serves the API and its Swagger UI at
`http://0.0.0.0:8001/docs`. Set ANTHROPIC_API_KEY in `.env` before calling /tailor.
"""
import signal
import sys

import uvicorn


def main(host: str = "0.0.0.0", port: int = 8001, reload: bool = True):
    # Use Uvicorn programmatically for proper cleanup on Ctrl+C
    config = uvicorn.Config("api.server:app", host=host, port=port, reload=reload)
    server = uvicorn.Server(config)

    def handle_exit(sig, frame):
        print("\nShutting down Resume Tailor API...")
        server.should_exit = True

    signal.signal(signal.SIGINT, handle_exit)
    signal.signal(signal.SIGTERM, handle_exit)

    server.run()
    print("Server stopped cleanly.")


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        print("\nKeyboard interrupt received. Exiting...")
        sys.exit(0)
