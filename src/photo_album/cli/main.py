"""Main CLI interface for the photo album library."""

from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Optional, Tuple

import click
from rich.console import Console
from rich.table import Table

from ..core.config import Config, set_config
from ..core.logger import get_logger, setup_logging
from ..library.repository import LibraryRepository
from ..library.search import PhotoSearch
from ..models.album import Album
from ..models.photo import Photo, Tag
from ..models.user import ADMIN_USERNAME, User
from ..pipeline.importer import PhotoImporter
from ..utils.date_utils import DateUtils

console = Console()
logger = get_logger(__name__)

user_option = click.option('-u', '--user', 'username', required=True, help='Account to act as')
save_as_option = click.option('--save-as', 'save_as', default=None,
                              help='Create an album with the matching photos')


def fail(ctx: click.Context, message: str) -> None:
    """Report a rejected operation and exit with a non-zero status."""
    console.print(f"[red]{message}[/red]")
    ctx.exit(1)


def absolute_path(path: str) -> str:
    return str(Path(path).expanduser().resolve())


def format_date(value) -> str:
    return value.strftime("%Y-%m-%d %H:%M:%S") if value else "-"


@contextmanager
def open_session(ctx: click.Context, username: str) -> Iterator[LibraryRepository]:
    """Load the library, log in, and save everything on the way out."""
    repository = LibraryRepository(ctx.obj['config'])
    try:
        if not repository.authenticate(username):
            fail(ctx, f"Unknown user: {username}")
        yield repository
    finally:
        repository.logout()


def require_album(ctx: click.Context, user: User, name: str) -> Album:
    album = user.get_album(name)
    if album is None:
        fail(ctx, f"No album named '{name}'")
    return album


def require_photo(ctx: click.Context, user: User, path: str) -> Photo:
    photo = user.find_photo(absolute_path(path))
    if photo is None:
        fail(ctx, f"No photo at {absolute_path(path)} in any album")
    return photo


def display_photos(photos: List[Photo], title: str) -> None:
    """Display photos in a table."""
    if not photos:
        console.print(f"[yellow]{title}: no matching photos[/yellow]")
        return

    table = Table(title=title)
    table.add_column("File", style="cyan")
    table.add_column("Caption", style="white")
    table.add_column("Date", style="yellow")
    table.add_column("Tags", style="green")

    for photo in photos:
        table.add_row(
            photo.file_path,
            photo.caption,
            format_date(photo.date_time),
            ", ".join(str(tag) for tag in photo.tags),
        )

    console.print(table)


@click.group()
@click.option('--debug', is_flag=True, help='Enable debug logging')
@click.option('--config-file', type=click.Path(exists=True, dir_okay=False), help='Path to configuration file')
@click.option('--data-dir', type=click.Path(file_okay=False), help='Directory holding the library records')
@click.pass_context
def main(ctx: click.Context, debug: bool, config_file: Optional[str], data_dir: Optional[str]):
    """Photo Album CLI - albums, captions, tags and search for your photos.

    \b
    Examples:
    photo-album users create alice
    photo-album albums create -u alice Trip
    photo-album photos add -u alice Trip ~/Pictures/a.jpg ~/Pictures/b.jpg
    photo-album photos tag -u alice ~/Pictures/a.jpg location NYC
    photo-album search date -u alice 2023-06-01 2023-06-05
    photo-album search tag -u alice location NYC --or person Sam --save-as Mix
    """
    ctx.ensure_object(dict)

    overrides = {}
    if data_dir:
        overrides['data_dir'] = Path(data_dir)
        overrides['log_dir'] = Path(data_dir) / "logs"
    if debug:
        overrides['debug'] = True
        overrides['log_level'] = "DEBUG"

    try:
        config = Config(config_file=Path(config_file) if config_file else None, **overrides)
    except (OSError, ValueError) as e:
        console.print(f"[red]Failed to load configuration: {e}[/red]")
        ctx.exit(1)

    set_config(config)
    setup_logging(config.log_level, log_dir=config.log_dir, enable_color=not config.debug)
    ctx.obj['config'] = config


@main.group()
def users():
    """Manage accounts (admin session)."""


@users.command('list')
@click.pass_context
def users_list(ctx: click.Context):
    """List every account on the roster."""
    with open_session(ctx, ADMIN_USERNAME) as repository:
        table = Table(title="Users")
        table.add_column("Username", style="cyan")
        table.add_column("Albums", style="white")
        table.add_column("Status", style="green")

        for username in repository.get_all_usernames():
            user = repository.get_user(username)
            if user is None:
                table.add_row(username, "-", "[red]unavailable[/red]")
            else:
                table.add_row(username, str(len(user.albums)), "loaded")

        console.print(table)


@users.command('create')
@click.argument('username')
@click.pass_context
def users_create(ctx: click.Context, username: str):
    """Create an account."""
    with open_session(ctx, ADMIN_USERNAME) as repository:
        if repository.create_user(username) is None:
            fail(ctx, f"Cannot create user '{username}': name is blank, reserved or taken")
        console.print(f"[green]Created user '{username}'[/green]")


@users.command('delete')
@click.argument('username')
@click.pass_context
def users_delete(ctx: click.Context, username: str):
    """Delete an account and its albums."""
    with open_session(ctx, ADMIN_USERNAME) as repository:
        if not repository.delete_user(username):
            fail(ctx, f"Cannot delete user '{username}'")
        console.print(f"[green]Deleted user '{username}'[/green]")


@main.group()
def albums():
    """Create, rename, delete and inspect albums."""


@albums.command('list')
@user_option
@click.pass_context
def albums_list(ctx: click.Context, username: str):
    """List albums with photo counts and date ranges."""
    with open_session(ctx, username) as repository:
        table = Table(title=f"Albums of {username}")
        table.add_column("Name", style="cyan")
        table.add_column("Photos", style="white")
        table.add_column("Earliest", style="yellow")
        table.add_column("Latest", style="yellow")

        for album in repository.current_user.albums:
            table.add_row(
                album.name,
                str(album.photo_count),
                format_date(album.earliest_date),
                format_date(album.latest_date),
            )

        console.print(table)


@albums.command('create')
@user_option
@click.argument('name')
@click.pass_context
def albums_create(ctx: click.Context, username: str, name: str):
    """Create an empty album."""
    with open_session(ctx, username) as repository:
        if repository.current_user.create_album(name) is None:
            fail(ctx, f"Album name '{name}' is blank or already used")
        console.print(f"[green]Created album '{name}'[/green]")


@albums.command('rename')
@user_option
@click.argument('old_name')
@click.argument('new_name')
@click.pass_context
def albums_rename(ctx: click.Context, username: str, old_name: str, new_name: str):
    """Rename an album."""
    with open_session(ctx, username) as repository:
        if not repository.current_user.rename_album(old_name, new_name):
            fail(ctx, f"Cannot rename '{old_name}' to '{new_name}'")
        console.print(f"[green]Renamed '{old_name}' to '{new_name}'[/green]")


@albums.command('delete')
@user_option
@click.argument('name')
@click.pass_context
def albums_delete(ctx: click.Context, username: str, name: str):
    """Delete an album."""
    with open_session(ctx, username) as repository:
        if not repository.current_user.delete_album(name):
            fail(ctx, f"No album named '{name}'")
        console.print(f"[green]Deleted album '{name}'[/green]")


@albums.command('show')
@user_option
@click.argument('name')
@click.pass_context
def albums_show(ctx: click.Context, username: str, name: str):
    """Show the photos of an album in order."""
    with open_session(ctx, username) as repository:
        album = require_album(ctx, repository.current_user, name)
        display_photos(album.photos, f"Album '{name}'")


@main.group()
def photos():
    """Add, remove, copy, move, caption and tag photos."""


@photos.command('add')
@user_option
@click.argument('album_name')
@click.argument('paths', nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False))
@click.pass_context
def photos_add(ctx: click.Context, username: str, album_name: str, paths: Tuple[str, ...]):
    """Import image files into an album."""
    with open_session(ctx, username) as repository:
        album = require_album(ctx, repository.current_user, album_name)
        importer = PhotoImporter(ctx.obj['config'])

        added = 0
        for path in paths:
            photo = importer.import_file(path)
            if photo is None:
                console.print(f"[yellow]Skipped {path}: not a readable image[/yellow]")
            elif not album.add_photo(photo):
                console.print(f"[yellow]Skipped {path}: already in '{album_name}'[/yellow]")
            else:
                added += 1

        console.print(f"[green]Added {added} photo(s) to '{album_name}'[/green]")


@photos.command('remove')
@user_option
@click.argument('album_name')
@click.argument('path')
@click.pass_context
def photos_remove(ctx: click.Context, username: str, album_name: str, path: str):
    """Remove a photo from an album."""
    with open_session(ctx, username) as repository:
        album = require_album(ctx, repository.current_user, album_name)
        photo = require_photo(ctx, repository.current_user, path)
        if not album.remove_photo(photo):
            fail(ctx, f"Photo is not in '{album_name}'")
        console.print(f"[green]Removed {photo.file_name} from '{album_name}'[/green]")


@photos.command('copy')
@user_option
@click.argument('source')
@click.argument('destination')
@click.argument('path')
@click.pass_context
def photos_copy(ctx: click.Context, username: str, source: str, destination: str, path: str):
    """List a photo in another album too."""
    with open_session(ctx, username) as repository:
        user = repository.current_user
        source_album = require_album(ctx, user, source)
        destination_album = require_album(ctx, user, destination)
        photo = require_photo(ctx, user, path)
        if photo not in source_album:
            fail(ctx, f"Photo is not in '{source}'")
        if not user.copy_photo(photo, destination_album):
            fail(ctx, f"Photo is already in '{destination}'")
        console.print(f"[green]Copied {photo.file_name} to '{destination}'[/green]")


@photos.command('move')
@user_option
@click.argument('source')
@click.argument('destination')
@click.argument('path')
@click.pass_context
def photos_move(ctx: click.Context, username: str, source: str, destination: str, path: str):
    """Move a photo from one album to another."""
    with open_session(ctx, username) as repository:
        user = repository.current_user
        source_album = require_album(ctx, user, source)
        destination_album = require_album(ctx, user, destination)
        photo = require_photo(ctx, user, path)
        if not user.move_photo(photo, source_album, destination_album):
            fail(ctx, f"Cannot move {photo.file_name} from '{source}' to '{destination}'")
        console.print(f"[green]Moved {photo.file_name} to '{destination}'[/green]")


@photos.command('caption')
@user_option
@click.argument('path')
@click.argument('caption')
@click.pass_context
def photos_caption(ctx: click.Context, username: str, path: str, caption: str):
    """Set a photo's caption."""
    with open_session(ctx, username) as repository:
        photo = require_photo(ctx, repository.current_user, path)
        photo.caption = caption
        console.print(f"[green]Captioned {photo.file_name}[/green]")


@photos.command('tag')
@user_option
@click.argument('path')
@click.argument('tag_type')
@click.argument('value')
@click.option('--new-type', is_flag=True, help='Add the tag type to the vocabulary if it is new')
@click.pass_context
def photos_tag(ctx: click.Context, username: str, path: str, tag_type: str, value: str, new_type: bool):
    """Tag a photo with TAG_TYPE=VALUE."""
    with open_session(ctx, username) as repository:
        user = repository.current_user
        photo = require_photo(ctx, user, path)

        if not value.strip():
            fail(ctx, "Tag value cannot be empty")
        if tag_type not in user.tag_types:
            if not new_type:
                fail(ctx, f"Unknown tag type '{tag_type}' (use --new-type to add it)")
            if not user.add_tag_type(tag_type):
                fail(ctx, "Tag type cannot be empty")

        if not photo.add_tag(Tag(tag_type, value)):
            fail(ctx, f"{photo.file_name} already has tag {tag_type}: {value}")
        console.print(f"[green]Tagged {photo.file_name} with {tag_type}: {value}[/green]")


@photos.command('untag')
@user_option
@click.argument('path')
@click.argument('tag_type')
@click.argument('value')
@click.pass_context
def photos_untag(ctx: click.Context, username: str, path: str, tag_type: str, value: str):
    """Remove the TAG_TYPE=VALUE tag from a photo."""
    with open_session(ctx, username) as repository:
        photo = require_photo(ctx, repository.current_user, path)
        if not photo.remove_tag(Tag(tag_type, value)):
            fail(ctx, f"{photo.file_name} has no tag {tag_type}: {value}")
        console.print(f"[green]Removed tag {tag_type}: {value} from {photo.file_name}[/green]")


@main.group('tag-types')
def tag_types():
    """Manage a user's tag types."""


@tag_types.command('list')
@user_option
@click.pass_context
def tag_types_list(ctx: click.Context, username: str):
    """List tag types."""
    with open_session(ctx, username) as repository:
        for tag_type in repository.current_user.tag_types:
            console.print(tag_type)


@tag_types.command('add')
@user_option
@click.argument('tag_type')
@click.pass_context
def tag_types_add(ctx: click.Context, username: str, tag_type: str):
    """Add a tag type."""
    with open_session(ctx, username) as repository:
        if not repository.current_user.add_tag_type(tag_type):
            fail(ctx, f"Tag type '{tag_type}' is blank or already defined")
        console.print(f"[green]Added tag type '{tag_type}'[/green]")


@main.group()
def search():
    """Find photos across all of a user's albums."""


def finish_search(ctx: click.Context, searcher: PhotoSearch, results: List[Photo],
                  title: str, save_as: Optional[str]) -> None:
    display_photos(results, title)
    if save_as is not None:
        album = searcher.save_as_album(save_as, results)
        if album is None:
            fail(ctx, f"Album name '{save_as}' is blank or already used")
        console.print(f"[green]Created album '{save_as}' with {album.photo_count} photo(s)[/green]")


@search.command('date')
@user_option
@click.argument('start')
@click.argument('end')
@save_as_option
@click.pass_context
def search_date(ctx: click.Context, username: str, start: str, end: str, save_as: Optional[str]):
    """Photos dated from START through END (YYYY-MM-DD), inclusive."""
    start_date = DateUtils.parse_date_string(start)
    end_date = DateUtils.parse_date_string(end)
    if start_date is None or end_date is None:
        fail(ctx, "Dates must look like YYYY-MM-DD")

    with open_session(ctx, username) as repository:
        searcher = PhotoSearch(repository.current_user)
        results = searcher.by_date_range(start_date, end_date)
        if results is None:
            fail(ctx, "Start date must not be after end date")
        finish_search(ctx, searcher, results, f"Photos from {start_date} to {end_date}", save_as)


@search.command('tag')
@user_option
@click.argument('tag_type')
@click.argument('value')
@click.option('--and', 'and_tag', nargs=2, type=str, default=None, metavar='TYPE VALUE',
              help='Also require this tag')
@click.option('--or', 'or_tag', nargs=2, type=str, default=None, metavar='TYPE VALUE',
              help='Accept this tag instead')
@save_as_option
@click.pass_context
def search_tag(ctx: click.Context, username: str, tag_type: str, value: str,
               and_tag: Optional[Tuple[str, str]], or_tag: Optional[Tuple[str, str]],
               save_as: Optional[str]):
    """Photos tagged TAG_TYPE=VALUE, optionally combined with a second tag."""
    if and_tag and or_tag:
        fail(ctx, "Use either --and or --or, not both")

    first = Tag(tag_type, value)
    with open_session(ctx, username) as repository:
        searcher = PhotoSearch(repository.current_user)
        if and_tag:
            second = Tag(*and_tag)
            results = searcher.by_all_tags(first, second)
            title = f"Photos tagged {first} AND {second}"
        elif or_tag:
            second = Tag(*or_tag)
            results = searcher.by_any_tag(first, second)
            title = f"Photos tagged {first} OR {second}"
        else:
            results = searcher.by_tag(tag_type, value)
            title = f"Photos tagged {first}"

        finish_search(ctx, searcher, results, title, save_as)


if __name__ == '__main__':
    main()
