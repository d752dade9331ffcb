import typer
import uvicorn

from google_oauth_token.auth_strategies.oauth.endpoints import resolve_endpoints

app = typer.Typer(help="google-oauth-token CLI")


@app.command()
def run(
    host: str = "0.0.0.0",
    port: int = 8000,
    reload: bool = False,
) -> None:
    """
    Run the demo FastAPI server
    """
    uvicorn.run(
        "google_oauth_token.main:app",
        host=host,
        port=port,
        reload=reload,
    )


@app.command()
def endpoints(
    auth_url_version: str = "v2",
    token_url_version: str = "v4",
    userinfo_url_version: str = "v3",
) -> None:
    """
    Print the Google endpoint URLs resolved for the given versions
    """
    resolved = resolve_endpoints(
        auth_url_version=auth_url_version,
        token_url_version=token_url_version,
        userinfo_url_version=userinfo_url_version,
    )
    typer.echo(f"authorization: {resolved.authorization_url}")
    typer.echo(f"token:         {resolved.token_url}")
    typer.echo(f"userinfo:      {resolved.profile_url}")


if __name__ == "__main__":
    app()
