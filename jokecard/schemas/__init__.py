from jokecard.schemas.schemas import Joke, RenderOptions

__all__ = ["Joke", "RenderOptions"]
