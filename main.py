"""Command line access to the JSONPlaceholder users and comments endpoints."""
import logging
import sys
from typing import List, Optional
import httpx
import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from config.settings import load_settings
from placeholder_api.endpoints import CommentEndpoint, UserEndpoint
from placeholder_api.errors import PlaceholderApiError
from placeholder_api.http.specification import RequestSpecification
from placeholder_api.models.dto import CommentDto, UserDto

app = typer.Typer(
    help="JSONPlaceholder API client - create, update, get and list users and comments",
    no_args_is_help=True
)
users_app = typer.Typer(help="Operate on /users", no_args_is_help=True)
comments_app = typer.Typer(help="Operate on /comments", no_args_is_help=True)
app.add_typer(users_app, name="users")
app.add_typer(comments_app, name="comments")

console = Console()

# Set by the root callback, read by subcommands
session_state = {
    "specification": None,
    "transport": None,
}


def _specification() -> RequestSpecification:
    spec = session_state["specification"]
    if spec is None:
        spec = RequestSpecification.from_settings(transport=session_state["transport"])
        session_state["specification"] = spec
    return spec


def _fail(message: str):
    console.print(f"[red]Error: {escape(message)}[/red]")
    sys.exit(1)


def print_users_table(users: List[UserDto]):
    """Print users as a Rich table."""
    table = Table(title=f"Users ({len(users)})", show_header=True, header_style="bold magenta")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Name", style="green")
    table.add_column("Username")
    table.add_column("Email")
    for user in users:
        table.add_row(str(user.id) if user.id is not None else "-", user.name, user.username or "-", user.email or "-")
    console.print(table)


def print_comments_table(comments: List[CommentDto]):
    """Print comments as a Rich table."""
    table = Table(title=f"Comments ({len(comments)})", show_header=True, header_style="bold magenta")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Post", style="cyan", no_wrap=True)
    table.add_column("Name", style="green")
    table.add_column("Email")
    for comment in comments:
        table.add_row(
            str(comment.id) if comment.id is not None else "-",
            str(comment.post_id) if comment.post_id is not None else "-",
            comment.name,
            comment.email,
        )
    console.print(table)


def print_resource(title: str, dto):
    """Print one resource as a panel of its wire fields."""
    lines = [f"[cyan]{key}[/cyan]: {escape(str(value))}" for key, value in dto.to_payload().items()]
    console.print(Panel("\n".join(lines), title=f"[bold bright_blue]{title}[/bold bright_blue]", border_style="bright_blue"))


def _run(action):
    """Run an endpoint call, turning client errors into exit code 1."""
    try:
        return action()
    except PlaceholderApiError as e:
        _fail(str(e))
    except httpx.HTTPError as e:
        _fail(f"Request failed: {e}")


@app.callback()
def main(
    base_url: Optional[str] = typer.Option(None, "--base-url", help="Override API_BASE_URL"),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging")
):
    """
    Configure logging and the request specification for all commands.
    """
    try:
        settings = load_settings()
    except ValueError as e:
        _fail(str(e))
    level = logging.DEBUG if verbose else getattr(logging, settings.log_level, logging.INFO)
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    session_state["specification"] = RequestSpecification(
        base_url or settings.base_url,
        timeout=settings.timeout,
        transport=session_state["transport"],
    )


# Users

@users_app.command(name="list")
def list_users():
    """List all users."""
    users = _run(lambda: UserEndpoint(_specification()).get_all())
    print_users_table(users)


@users_app.command(name="get")
def get_user(user_id: str = typer.Argument(..., help="User id")):
    """Show one user."""
    user = _run(lambda: UserEndpoint(_specification()).get_by_id(user_id))
    print_resource(f"User {user_id}", user)


@users_app.command(name="create")
def create_user(
    name: str = typer.Option(..., "--name", help="Full name"),
    username: Optional[str] = typer.Option(None, "--username", help="Login name"),
    email: Optional[str] = typer.Option(None, "--email", help="Email address")
):
    """Create a user."""
    dto = UserDto(name=name, username=username, email=email)
    user = _run(lambda: UserEndpoint(_specification()).create(dto))
    console.print("[green]✓ User created[/green]")
    print_resource(f"User {user.id}", user)


@users_app.command(name="update")
def update_user(
    user_id: str = typer.Argument(..., help="User id"),
    name: str = typer.Option(..., "--name", help="Full name"),
    username: Optional[str] = typer.Option(None, "--username", help="Login name"),
    email: Optional[str] = typer.Option(None, "--email", help="Email address")
):
    """Replace a user."""
    dto = UserDto(name=name, username=username, email=email)
    user = _run(lambda: UserEndpoint(_specification()).update(user_id, dto))
    console.print("[green]✓ User updated[/green]")
    print_resource(f"User {user_id}", user)


# Comments

@comments_app.command(name="list")
def list_comments():
    """List all comments."""
    comments = _run(lambda: CommentEndpoint(_specification()).get_all())
    print_comments_table(comments)


@comments_app.command(name="get")
def get_comment(comment_id: int = typer.Argument(..., help="Comment id")):
    """Show one comment."""
    comment = _run(lambda: CommentEndpoint(_specification()).get_by_id(comment_id))
    print_resource(f"Comment {comment_id}", comment)


@comments_app.command(name="create")
def create_comment(
    post_id: int = typer.Option(..., "--post-id", help="Post the comment belongs to"),
    name: str = typer.Option(..., "--name", help="Comment title"),
    email: str = typer.Option(..., "--email", help="Author email"),
    body: str = typer.Option(..., "--body", help="Comment text")
):
    """Create a comment."""
    dto = CommentDto(post_id=post_id, name=name, email=email, body=body)
    comment = _run(lambda: CommentEndpoint(_specification()).create(dto))
    console.print("[green]✓ Comment created[/green]")
    print_resource(f"Comment {comment.id}", comment)


@comments_app.command(name="update")
def update_comment(
    comment_id: int = typer.Argument(..., help="Comment id"),
    post_id: int = typer.Option(..., "--post-id", help="Post the comment belongs to"),
    name: str = typer.Option(..., "--name", help="Comment title"),
    email: str = typer.Option(..., "--email", help="Author email"),
    body: str = typer.Option(..., "--body", help="Comment text")
):
    """Replace a comment."""
    dto = CommentDto(id=comment_id, post_id=post_id, name=name, email=email, body=body)
    comment = _run(lambda: CommentEndpoint(_specification()).update(comment_id, dto))
    console.print("[green]✓ Comment updated[/green]")
    print_resource(f"Comment {comment_id}", comment)


if __name__ == "__main__":
    app()
