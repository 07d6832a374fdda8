from __future__ import annotations

import logging
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from config.settings import ServerConfig, Settings, get_settings
from generator import JOKE_PROMPT, PROJECT_ID, GeminiJokeGenerator, JokeGenerator


logger = logging.getLogger("dadjoke")


def create_app(
    generator: Optional[JokeGenerator] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    """Build an app serving jokes at ``/`` and every path below it."""
    settings = settings or get_settings()
    generator = generator or GeminiJokeGenerator(settings)

    def tell_joke(request: Request) -> PlainTextResponse:
        logger.info("Incoming request: %s %s", request.method, request.url.path)
        # Request content never reaches the generator.
        try:
            joke = generator.generate(JOKE_PROMPT, PROJECT_ID)
        except Exception as e:
            logger.exception("Joke generation failed: %s", e)
            return PlainTextResponse(
                f"error: {e}\n", status_code=settings.error_status_code
            )

        logger.info("Model responded: %s chars", len(joke))
        return PlainTextResponse(joke)

    app = FastAPI(title="Dad Joke Server", version="1.0.0")
    # Plain routes without a method list accept every verb.
    app.add_route("/", tell_joke)
    app.add_route("/{path:path}", tell_joke, include_in_schema=False)
    return app


def serve(app: FastAPI, config: ServerConfig) -> None:
    logger.info("Listening on %s:%s", config.host, config.port)
    uvicorn.run(app, host=config.host, port=config.port)


def main() -> None:
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="[%(asctime)s] %(levelname)s - %(message)s",
    )
    config = ServerConfig.from_env()
    serve(create_app(settings=settings), config)


if __name__ == "__main__":
    main()
