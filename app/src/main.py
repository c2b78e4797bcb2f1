"""FastAPI web shell serving sprite-invaders frames to a browser."""

import os
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException, Query
from fastapi.requests import Request
from fastapi.responses import HTMLResponse, JSONResponse, PlainTextResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates
from PIL import Image

from sprite_invaders.config import ConfigError, GameConfig
from sprite_invaders.game.atlas import SpriteAtlas
from sprite_invaders.runtime import GameRunner

load_dotenv()

PUBLIC_DIR = Path(os.getenv("INVADERS_PUBLIC_DIR", Path(__file__).parent / "public"))
NO_CACHE = {"Cache-Control": "no-cache"}


def _load_image(path: Path) -> Image.Image | None:
    if not path.is_file():
        return None
    with Image.open(path) as img:
        return img.convert("RGBA")


def create_runner(public_dir: Path = PUBLIC_DIR) -> GameRunner:
    """Build a runner from the environment and any artwork found in ``public_dir``."""
    images = public_dir / "images"
    sheet = images / "sprites.png"
    atlas = SpriteAtlas.from_file(sheet) if sheet.is_file() else None
    return GameRunner(
        GameConfig.from_env(),
        atlas=atlas,
        background=_load_image(images / "bg.png"),
        end_background=_load_image(images / "gameover.png"),
    )


def create_app(runner: GameRunner | None = None) -> FastAPI:
    web = FastAPI(title="Sprite Invaders")
    web.state.runner = runner or create_runner()
    templates = Jinja2Templates(directory=Path(__file__).parent / "templates")
    if PUBLIC_DIR.is_dir():
        web.mount("/public", StaticFiles(directory=PUBLIC_DIR), name="public")

    @web.get("/", response_class=HTMLResponse)
    async def index(request: Request):
        """Serve the game page."""
        game: GameRunner = web.state.runner
        return templates.TemplateResponse(
            request,
            "index.html",
            {
                "width": game.config.width,
                "height": game.config.height,
                "interval": max(1, game.config.tick_delay_ms),
            },
        )

    @web.post("/start")
    async def start():
        """Start the tick loop if it is not already running."""
        started = web.state.runner.start()
        return JSONResponse({"started": started})

    @web.get("/frame", response_class=PlainTextResponse)
    async def frame():
        """Latest frame as a PNG data URL."""
        return PlainTextResponse(web.state.runner.frame_data_url(), headers=NO_CACHE)

    @web.post("/key")
    async def key(event: str = Query(..., min_length=1, description="Key code or event name")):
        """Forward one input token to the game."""
        game: GameRunner = web.state.runner
        if not game.running:
            raise HTTPException(status_code=409, detail="Game is not running")
        accepted = game.post(event)
        return JSONResponse({"accepted": accepted}, headers=NO_CACHE)

    @web.get("/cues")
    async def cues():
        """Sound cues requested since the last call."""
        return JSONResponse({"cues": web.state.runner.drain_cues()}, headers=NO_CACHE)

    return web


try:
    app = create_app()
except ConfigError as e:
    raise SystemExit(f"Invalid configuration: {e}")

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="127.0.0.1", port=int(os.getenv("PORT", "8000")))
