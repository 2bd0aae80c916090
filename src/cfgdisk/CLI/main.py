# Copyright 2024 Michael Maillet, Damien Davison, Sacha Davison
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
Command Line Interface for cfgdisk.
"""
import click
from ..BUILDERS.image_builder import ConfigImageBuilder
from ..BUILDERS.iso_creator import XorrisoImageCreator
from ..CONFIG import paths
from ..CONFIG.settings import load_settings
from ..errors import ConfigDiskError
from ..MANAGERS.config_disk_manager import ConfigDiskManager
from ..MODELS.config_source import ConfigType
from ..PARSERS.manifest_parser import ManifestParser
from ..UTILS.logging import init_logging

TYPE_CHOICES = [t.value for t in ConfigType] + ['all']


@click.group()
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging')
@click.option('--env-file', default='.env', help='Settings file with CFGDISK_* variables')
@click.pass_context
def cli(ctx, verbose, env_file):
    """
    cfgdisk - render mounted config data into ISO disks.

    Builds the ConfigMap, Secret, DownwardAPI and ServiceAccount disks attached
    to a virtual machine.
    """
    ctx.ensure_object(dict)
    try:
        settings = load_settings(env_file)
    except ConfigDiskError as e:
        raise click.ClickException(str(e))
    if verbose:
        settings.verbose = True
    init_logging(settings.verbose)
    ctx.obj['settings'] = settings
    ctx.obj['builder'] = ConfigImageBuilder(
        iso_creator=XorrisoImageCreator(iso_binary=settings.iso_binary))


@cli.command(name='paths')
def show_paths():
    """List the source and disk directories of each config type."""
    click.echo(f"{'TYPE':15} {'SOURCE':50} {'DISKS':40}")
    click.echo("-" * 105)
    for config_type in ConfigType:
        entry = paths.get_paths(config_type)
        click.echo(f"{config_type.value:15} {entry.source_dir:50} {entry.disks_dir:40}")


@cli.command()
@click.argument('output')
@click.argument('source_dir')
@click.option('--volid', default='', help='ISO volume label (default: cfgdata)')
@click.option('--size', default=0, type=click.IntRange(min=0),
              help='Create an empty image of this many bytes instead')
@click.pass_context
def build(ctx, output, source_dir, volid, size):
    """Build a single image from SOURCE_DIR into OUTPUT."""
    builder = ctx.obj['builder']
    try:
        builder.create_config_image(output, volid, source_dir, size)
    except ConfigDiskError as e:
        raise click.ClickException(str(e))
    click.echo(f"Created {output}")


@cli.command()
@click.option('--file', '-f', 'manifest', required=True, help='VirtualMachineInstance manifest path')
@click.option('--type', '-t', 'config_type', type=click.Choice(TYPE_CHOICES), default='all')
@click.option('--empty', is_flag=True, help='Create placeholders sized from the volume status')
@click.pass_context
def disks(ctx, manifest, config_type, empty):
    """Create the config disks of a virtual machine instance."""
    manager = ConfigDiskManager(ctx.obj['builder'])
    try:
        vmi = ManifestParser().parse(manifest)
        if config_type == 'all':
            created = manager.create_all_disks(vmi, empty)
        else:
            created = manager.create_disks(vmi, ConfigType(config_type), empty)
    except ConfigDiskError as e:
        raise click.ClickException(str(e))

    if not created:
        click.echo("No config volumes found.")
    for disk in created:
        click.echo(f"Created {disk}")


def main():
    """
    Main entry point for the CLI.
    """
    cli(obj={})


if __name__ == '__main__':
    main()
