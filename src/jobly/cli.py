"""Typer CLI entry point for Jobly."""

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from jobly.config import load_config

app = typer.Typer(
    name="jobly",
    help="Jobly: companies and jobs API",
    no_args_is_help=True,
)
console = Console()


def _get_config():
    config = load_config(Path("config.yaml"))
    logging.basicConfig(
        level=config.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return config


def _get_db():
    from jobly.db import get_session, init_db

    config = _get_config()
    engine = init_db(config.db_path)
    return get_session(engine)


@app.command("init-db")
def init_db_cmd():
    """Create the database tables."""
    from jobly.db import init_db

    config = _get_config()
    init_db(config.db_path)
    console.print(f"[green]Database ready:[/green] {config.db_path}")


@app.command()
def companies(
    name: str | None = typer.Option(None, "--name", "-n", help="Name contains (any case)"),
    min_employees: int | None = typer.Option(None, "--min-employees", help="Minimum headcount"),
    max_employees: int | None = typer.Option(None, "--max-employees", help="Maximum headcount"),
):
    """List companies."""
    from pydantic import ValidationError

    from jobly.errors import InvalidInputError
    from jobly.models import CompanyFilters
    from jobly.repositories import companies as company_repo

    session = _get_db()
    try:
        filters = CompanyFilters(name=name, min_employees=min_employees, max_employees=max_employees)
        company_list = company_repo.find_all(session, filters.to_payload())
    except ValidationError as e:
        for err in e.errors():
            console.print(f"[red]{err['loc'][0]}: {err['msg']}[/red]")
        raise typer.Exit(1)
    except InvalidInputError as e:
        console.print(f"[red]{e.message}[/red]")
        raise typer.Exit(1)
    finally:
        session.close()

    if not company_list:
        console.print("[yellow]No companies found.[/yellow]")
        return

    table = Table(title=f"Companies ({len(company_list)} results)")
    table.add_column("Handle", style="dim")
    table.add_column("Name", style="bold", max_width=35)
    table.add_column("Employees", justify="right")
    table.add_column("Description", max_width=40)

    for company in company_list:
        employees = str(company.num_employees) if company.num_employees is not None else "-"
        table.add_row(company.handle, company.name, employees, company.description)

    console.print(table)


@app.command()
def token(
    username: str = typer.Argument(help="Username to put in the token"),
    admin: bool = typer.Option(False, "--admin", help="Mark the token as admin"),
):
    """Print a signed token (development helper)."""
    from jobly.auth import create_token

    config = _get_config()
    typer.echo(create_token(username, is_admin=admin, config=config.auth))


@app.command()
def serve(
    host: str = typer.Option(None, "--host", "-h", help="Bind host (default: from config)"),
    port: int = typer.Option(None, "--port", "-p", help="Bind port (default: from config)"),
    reload: bool = typer.Option(False, "--reload", help="Enable auto-reload for development"),
):
    """Start the API server."""
    import uvicorn

    config = _get_config()
    bind_host = host or config.web.host
    bind_port = port or config.web.port
    do_reload = reload or config.web.reload

    console.print("[bold]Starting Jobly API[/bold]")
    console.print(f"  http://{bind_host}:{bind_port}")

    uvicorn.run(
        "jobly.web.app:create_app",
        host=bind_host,
        port=bind_port,
        reload=do_reload,
        factory=True,
    )


@app.command("config")
def config_cmd():
    """Show current configuration."""
    config = _get_config()
    console.print(Panel(str(config.model_dump_json(indent=2)), title="Configuration"))


if __name__ == "__main__":
    app()
