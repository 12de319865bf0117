from fastapi import APIRouter, Depends, Request
from fastapi.responses import Response

from jokecard.config import settings
from jokecard.schemas import RenderOptions
from jokecard.services.joke_api import JokeClient
from jokecard.services.renderer import FontSet, render_joke_card

router = APIRouter(tags=["jokes"])

NO_CACHE_HEADERS = {
    "Cache-Control": "no-store, no-cache, must-revalidate",
    "Pragma": "no-cache",
    "Expires": "0",
}


def get_joke_client() -> JokeClient:
    return JokeClient(settings.joke_api_url, settings.request_timeout)


def get_render_options(request: Request) -> RenderOptions:
    return request.app.state.render_options


def get_fonts(request: Request) -> FontSet:
    return request.app.state.fonts


@router.get("/", response_class=Response)
def joke_image(
    request: Request,
    client: JokeClient = Depends(get_joke_client),
    options: RenderOptions = Depends(get_render_options),
    fonts: FontSet = Depends(get_fonts),
):
    joke = client.fetch(dict(request.query_params))
    png = render_joke_card(joke, options, fonts)
    headers = NO_CACHE_HEADERS if options.set_cache_headers else None
    return Response(content=png, media_type="image/png", headers=headers)
