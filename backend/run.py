"""Serve the book and people APIs.

Each service gets its own uvicorn server on its own port; by default both
run concurrently in one process.

Usage:
    python run.py [--service books|people|all]
"""
import argparse
import asyncio
import logging
import sys

from uvicorn import Config, Server

from api.main import app, people_app
from settings import settings


def _server(asgi_app, host: str, port: int) -> Server:
    config = Config(app=asgi_app, host=host, port=port, reload=False, log_level=settings.LOG_LEVEL.lower())
    return Server(config)


async def serve(service: str) -> bool:
    """Run the selected servers; False if any of them failed.

    A server that returns without having started (e.g. the index could not
    be created) or raises counts as a failure.
    """
    servers = []
    if service in ("books", "all"):
        servers.append(_server(app, settings.BOOKS_HOST, settings.BOOKS_PORT))
    if service in ("people", "all"):
        servers.append(_server(people_app, settings.PEOPLE_HOST, settings.PEOPLE_PORT))

    # A server that stops (e.g. failed startup) takes the others down with it.
    tasks = {asyncio.create_task(s.serve()): s for s in servers}
    done, pending = await asyncio.wait(tasks, return_when=asyncio.FIRST_COMPLETED)
    ok = True
    for task in done:
        if exception := task.exception():
            logging.exception("Exception in service", exc_info=exception)
            ok = False
        elif not tasks[task].started:
            logging.critical("Service on port %s failed to start", tasks[task].config.port)
            ok = False
    for task in pending:
        task.cancel()
    await asyncio.gather(*pending, return_exceptions=True)
    return ok


def main() -> None:
    parser = argparse.ArgumentParser(description="Run the bookstore REST services")
    parser.add_argument("--service", choices=["books", "people", "all"], default="all")
    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    try:
        ok = asyncio.run(serve(args.service))
    except (KeyboardInterrupt, SystemExit):
        return
    if not ok:
        sys.exit(1)


if __name__ == "__main__":
    main()
