import os

import requests
import typer

from taixiu_api.core.labels import FeedType

app = typer.Typer()
BASE = os.getenv("API_BASE", "http://127.0.0.1:5000")
TIMEOUT = 30


def _get(path: str):
    r = requests.get(f"{BASE}{path}", timeout=TIMEOUT)
    typer.echo(r.json())
    if r.status_code >= 400:
        raise typer.Exit(code=1)


@app.command()
def predict(feed: FeedType = typer.Argument(FeedType.hu)):
    _get(f"/{feed.value}")


@app.command()
def history(feed: FeedType = typer.Argument(FeedType.hu)):
    _get(f"/{feed.value}/lichsu")


@app.command()
def analysis(feed: FeedType = typer.Argument(FeedType.hu)):
    _get(f"/{feed.value}/analysis")


@app.command()
def serve(host: str = typer.Option(None), port: int = typer.Option(None)):
    import uvicorn
    from taixiu_api.config import settings
    uvicorn.run("taixiu_api.api.main:app", host=host or settings.host, port=port or settings.port)


if __name__ == "__main__":
    app()
