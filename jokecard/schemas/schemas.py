from pydantic import BaseModel, ConfigDict, Field


class Joke(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str
    category: str = "Unknown"


class RenderOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    canvas_width: int = Field(default=550, gt=75)
    font_scale: float = Field(default=25.0, gt=0)
    tag_font_scale: float = Field(default=15.0, gt=0)
    show_credit_line: bool = True
    set_cache_headers: bool = True
