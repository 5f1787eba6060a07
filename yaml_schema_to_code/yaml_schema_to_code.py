import json
import logging

import click

from .pipeline import GenerationError, GeneratorConfig, OutputMode, PipelineGenerator

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def _require_non_empty(ctx, param, value):
    if value is None or not value.strip():
        raise click.BadParameter("value must not be empty")
    return value


@click.command()
@click.option("--schema-dir", "-s", required=True, type=str, callback=_require_non_empty, help="Directory containing the YAML schema files")
@click.option("--output-dir", "-o", required=True, type=str, callback=_require_non_empty, help="Directory receiving the generated files")
@click.option("--template-path", "-t", required=True, type=str, callback=_require_non_empty, help="Template file or directory of templates")
@click.option("--language", "-l", required=True, type=str, callback=_require_non_empty, help="Target language label, selects the file extension")
@click.option("--config", "-c", default=None, type=click.Path(exists=True, dir_okay=False, resolve_path=True), help="JSON configuration file")
@click.option(
    "--output-mode",
    default=None,
    type=click.Choice([m.value for m in OutputMode]),
    help="What to do with existing output files (overrides config file)",
)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging")
def yaml_schema_to_code(schema_dir, output_dir, template_path, language, config, output_mode, verbose):
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO, format=LOG_FORMAT)

    try:
        if config is not None:
            with open(config) as f:
                config = GeneratorConfig.from_dict(json.load(f))
        else:
            config = GeneratorConfig()
    except json.JSONDecodeError as e:
        raise click.BadParameter(f"invalid JSON: {e}", param_hint="--config") from e
    except GenerationError as e:
        raise click.BadParameter(str(e), param_hint="--config") from e

    # CLI values override the config file
    config.language = language
    if output_mode is not None:
        config.output.mode = OutputMode(output_mode)

    codegen = PipelineGenerator(schema_dir, template_path, config)
    try:
        written = codegen.write(output_dir)
    except GenerationError as e:
        raise click.ClickException(str(e)) from e

    click.echo(f"Generated {len(written)} file(s) in {output_dir}")
