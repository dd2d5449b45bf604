# Copyright 2025 nurion team
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Maintenance commands for checkpoints kept on a local filesystem

Example usage:
    statefulstorage --root /var/checkpoints list my_topology
    statefulstorage --root /var/checkpoints prune my_topology --keep 3
    statefulstorage --root /var/checkpoints dispose my_topology --oldest 0000000042
    statefulstorage --root /var/checkpoints dispose my_topology --all
"""

import logging
import os
import sys
from typing import Optional

import click

from statefulstorage.config import LocalFileSystemStorageConfig
from statefulstorage.errors import StatefulStorageError
from statefulstorage.localfs import LocalFileSystemStorage


def setup_logging(level: str = "INFO"):
    """Setup logging configuration"""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


@click.group()
@click.option(
    "--root",
    "root_path",
    default=None,
    type=str,
    help="Checkpoint root path (defaults to STATEFULSTORAGE_LOCALFS__ROOT_PATH)",
)
@click.option(
    "--log-level",
    default=lambda: os.getenv("STATEFULSTORAGE_LOG_LEVEL", "WARNING"),
    type=str,
    help="Logging level",
)
@click.pass_context
def main(ctx, root_path: Optional[str], log_level: str):
    """Inspect and clean up stored checkpoints."""
    setup_logging(log_level)

    overrides = {"root_path": root_path} if root_path is not None else {}
    ctx.obj = LocalFileSystemStorage(LocalFileSystemStorageConfig(**overrides))


def _run(action):
    try:
        return action()
    except StatefulStorageError as exc:
        raise click.ClickException(str(exc)) from exc


@main.command("list")
@click.argument("topology")
@click.pass_obj
def list_checkpoints(storage: LocalFileSystemStorage, topology: str):
    """List checkpoint ids retained for TOPOLOGY, oldest first."""
    for checkpoint_id in _run(lambda: storage.list_checkpoint_ids(topology)):
        click.echo(checkpoint_id)


@main.command()
@click.argument("topology")
@click.option("--keep", type=int, default=None, help="Checkpoint ids to keep (defaults to max checkpoints)")
@click.pass_obj
def prune(storage: LocalFileSystemStorage, topology: str, keep: Optional[int]):
    """Delete all but the newest checkpoint ids of TOPOLOGY."""
    deleted = _run(lambda: storage.prune(topology, keep))
    click.echo(f"Deleted {len(deleted)} checkpoint(s)")


@main.command()
@click.argument("topology")
@click.option("--oldest", "oldest", type=str, default=None, help="Oldest checkpoint id to keep")
@click.option("--all", "delete_all", is_flag=True, default=False, help="Delete every checkpoint")
@click.pass_obj
def dispose(storage: LocalFileSystemStorage, topology: str, oldest: Optional[str], delete_all: bool):
    """Delete checkpoints of TOPOLOGY older than --oldest, or all of them."""
    if delete_all == (oldest is not None):
        raise click.UsageError("Pass exactly one of --oldest or --all")

    _run(lambda: storage.dispose(topology, oldest or "", delete_all))
    click.echo(f"Disposed checkpoints of {topology}")


if __name__ == "__main__":
    main()
