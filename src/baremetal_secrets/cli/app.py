# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

# src/baremetal_secrets/cli/app.py
from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
import yaml
from pydantic import ValidationError

from baremetal_secrets.bootstrap import bootstrap_secrets
from baremetal_secrets.config.loader import load_config
from baremetal_secrets.errors import SecretsError
from baremetal_secrets.logging.log import init_logging


app = typer.Typer(help="metal3 bootstrap secrets CLI")


@app.callback()
def main() -> None:
    """Create the metal3 / Ironic bootstrap secrets if they are missing."""


@app.command("ensure")
def ensure(
    config: Path = typer.Option(..., "--config", "-c", exists=True, dir_okay=False, help="Provisioning YAML"),
    namespace: Optional[str] = typer.Option(None, "--namespace", "-n", help="Override config namespace"),
    kube_context: Optional[str] = typer.Option(None, "--kube-context", help="Override kube context"),
    log_dir: Optional[Path] = typer.Option(None, "--log-dir", help="Directory for run logs"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="DEBUG output on console"),
):
    """
    Ensure every configured secret exists. Existing secrets are left untouched.
    """
    logger, run_id, log_path = init_logging(base_dir=log_dir, verbose=verbose)

    try:
        cfg = load_config(config)
    except (ValidationError, ValueError, yaml.YAMLError) as exc:
        logger.error("Invalid config %s: %s", config, exc)
        raise typer.BadParameter(f"Invalid config {config}:\n{exc}", param_hint="--config")

    overrides = {}
    if namespace:
        overrides["namespace"] = namespace
    if kube_context:
        overrides["kube_context"] = kube_context
    if overrides:
        cfg = cfg.model_copy(update=overrides)

    try:
        results = bootstrap_secrets(cfg)
    except SecretsError as exc:
        logger.error("Secret bootstrap failed: %s", exc)
        typer.secho(f"ERROR: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    for name, result in results.items():
        typer.echo(f"{name}: {result.value}")
    logger.info("=== Secret bootstrap finished (run_id=%s) ===", run_id)


if __name__ == "__main__":
    app()
