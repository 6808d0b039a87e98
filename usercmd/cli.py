import logging

import click

from .arguments import Arguments
from .dispatch import perform
from .errors import UserCmdError
from .utils.config import (
    get_default_file_name,
    get_file_permissions,
    get_log_dir,
    get_log_level,
    load_config,
)

DESCRIBE_OPERATION = (
    "Type of operation on the received item. Allowed values: "
    "add: add new item in file; "
    "list: returns list of items in file; "
    "findById: returns item from list by id; "
    "remove: delete item from list by id"
)
DESCRIBE_ID = "Id of item in file. Use this flag only with findById and remove operations"
DESCRIBE_ITEM = "JSON object which describes user by id, email and age fields"
DESCRIBE_FILENAME = "Name of file which contains list of users (items). Only .json allowed"

CLI_HELP = """\
usercmd keeps a list of users in a JSON file and lets you add, list, find
and remove them by id.

\b
Examples:
  usercmd -operation add -item '{"id":"1","email":"a@x.com","age":30}' -fileName users.json
  usercmd -operation list -fileName users.json
  usercmd -operation findById -id 1 -fileName users.json
  usercmd -operation remove -id 1 -fileName users.json

Duplicate adds and removes of unknown ids print a message and leave the
file untouched. Pass --json for structured output.
"""


def setup_logging(level: int) -> None:
    log_dir = get_log_dir()
    log_dir.mkdir(parents=True, exist_ok=True)

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.FileHandler(log_dir / "usercmd.log", delay=True),
        ],
    )


@click.command(
    help=CLI_HELP,
    context_settings={"help_option_names": ["-h", "--help"], "max_content_width": 120},
)
@click.option("-operation", "--operation", "operation", default="", help=DESCRIBE_OPERATION)
@click.option("-id", "--id", "record_id", default="", help=DESCRIBE_ID)
@click.option("-item", "--item", "item", default="", help=DESCRIBE_ITEM)
@click.option("-fileName", "--fileName", "file_name", default="", help=DESCRIBE_FILENAME)
@click.option("--json", "json_output", is_flag=True, help="Output as JSON")
def cli(operation, record_id, item, file_name, json_output):
    try:
        config = load_config()
        permissions = get_file_permissions(config)
        setup_logging(get_log_level(config))
    except (OSError, ValueError) as e:
        raise click.ClickException(f"Failed to load config: {e}")

    args = Arguments(
        operation=operation,
        id=record_id,
        item=item,
        file_name=file_name or get_default_file_name(config),
    )

    stdout = click.get_binary_stream("stdout")
    try:
        perform(args, stdout, "json" if json_output else "plain", permissions)
    except UserCmdError as e:
        raise click.ClickException(str(e))
    stdout.flush()
