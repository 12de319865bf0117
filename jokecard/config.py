from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from jokecard.schemas import RenderOptions

ASSETS_DIR = Path(__file__).resolve().parent / "assets"


class Settings(BaseSettings):
    app_name: str = "Joke Card API"
    joke_api_url: str = "https://v2.jokeapi.dev/joke/Any"
    request_timeout: float = 10.0
    font_path: str = str(ASSETS_DIR / "fonts" / "DejaVuSans.ttf")
    log_level: str = "INFO"

    # Render variant; defaults match the public deployment
    canvas_width: int = 550
    font_scale: float = 25.0
    tag_font_scale: float = 15.0
    show_credit_line: bool = True
    set_cache_headers: bool = True

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    def render_options(self) -> RenderOptions:
        return RenderOptions(
            canvas_width=self.canvas_width,
            font_scale=self.font_scale,
            tag_font_scale=self.tag_font_scale,
            show_credit_line=self.show_credit_line,
            set_cache_headers=self.set_cache_headers,
        )


settings = Settings()
