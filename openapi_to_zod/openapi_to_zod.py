import json
import logging
from pathlib import Path

import click

from .loader import load_spec
from .pipeline import CodeGenerationError, CodeGeneratorConfig, OutputMode, PipelineGenerator


@click.command()
@click.option("--output", "-o", default=None, type=click.Path(dir_okay=False, resolve_path=True))
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option("--prefix", "-p", default=None, type=str, help="Prefix prepended to every generated identifier")
@click.option(
    "--force",
    "-f",
    is_flag=True,
    default=False,
    help="Overwrite the output file if it already exists",
)
@click.argument("source", type=str)
def openapi_to_zod(output, config, prefix, force, source):
    """Generate Zod schemas from the components of the OpenAPI document SOURCE (path or URL)."""
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s: %(message)s")

    if config is not None:
        try:
            with open(config) as f:
                config = CodeGeneratorConfig.from_dict(json.load(f))
        except (OSError, ValueError) as e:
            raise click.ClickException(f"Invalid config file {config}: {e}") from e
    else:
        config = CodeGeneratorConfig()

    # CLI flags override the config file
    if prefix is not None:
        config.prefix = prefix
    if force:
        config.output.mode = OutputMode.FORCE

    try:
        codegen = PipelineGenerator(load_spec(source), config)
        if output is None:
            click.echo(codegen.generate())
            return
        codegen.generate_to_file(Path(output))
    except (CodeGenerationError, OSError) as e:
        raise click.ClickException(str(e)) from e

    click.echo(f"Zod schema generated and saved to {output}")
