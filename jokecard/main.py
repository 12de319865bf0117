from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from jokecard.config import Settings, settings
from jokecard.core.logging_config import configure_logging
from jokecard.routers import jokes
from jokecard.services.renderer import FontSet


def create_app(config: Settings | None = None) -> FastAPI:
    config = config or settings
    configure_logging(config.log_level)

    app = FastAPI(title=config.app_name, openapi_url=None, docs_url=None, redoc_url=None)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Fonts are shared read-only by every request; a missing font stops startup
    options = config.render_options()
    app.state.render_options = options
    app.state.fonts = FontSet.load(config.font_path, options)

    app.include_router(jokes.router)

    return app


app = create_app()
