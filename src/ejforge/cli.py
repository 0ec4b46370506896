"""Command line interface for ejforge."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Mapping, Sequence

from .config import GeneratorSettings
from .errors import GenerationError
from .io.adapters.system import (
    ConsolePrompt,
    ElixirModuleLookup,
    ElixirToolchainProbe,
    FixedToolchainProbe,
    MixDependencyFetcher,
)
from .io.interfaces import ToolchainProbe
from .models import GenerationRequest
from .scaffold import ProjectMaterializer


def _project_path(value: str) -> str:
    if not value.strip():
        raise argparse.ArgumentTypeError("PATH must not be empty")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate ejabberd projects")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every generation step",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    new_parser = subparsers.add_parser(
        "new",
        help="create a new ejabberd project",
        description=(
            "Create a new ejabberd project at PATH. The application and module "
            "names are inferred from PATH unless --app or --module is given."
        ),
    )
    new_parser.add_argument(
        "path", metavar="PATH", type=_project_path, help="Directory of the new project"
    )
    new_parser.add_argument(
        "--sup",
        action="store_true",
        help="Generate an OTP application skeleton including a supervision tree",
    )
    new_parser.add_argument("--app", metavar="APP", help="Name of the OTP application")
    new_parser.add_argument(
        "--module", metavar="MODULE", help="Name of the modules in the generated code"
    )
    new_parser.add_argument(
        "--no-exconfig",
        action="store_true",
        help="Use the ejabberd.yml configuration file instead of ejabberd.exs",
    )
    new_parser.add_argument(
        "-f",
        "--force",
        action="store_true",
        help="Overwrite existing files instead of asking",
    )
    new_parser.add_argument(
        "--install",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Fetch dependencies after generation without asking",
    )
    new_parser.add_argument(
        "--elixir-version",
        metavar="VERSION",
        help="Elixir version required by the project instead of the local one",
    )

    return parser


def _toolchain(args: argparse.Namespace, settings: GeneratorSettings) -> ToolchainProbe:
    if args.elixir_version:
        return FixedToolchainProbe(args.elixir_version)
    return ElixirToolchainProbe(settings.default_elixir_version, settings.elixir_executable)


def _handle_new(args: argparse.Namespace, settings: GeneratorSettings) -> int:
    request = GenerationRequest(
        path=args.path,
        app_name=args.app,
        module_name=args.module,
        include_supervisor=args.sup,
        legacy_config_format=args.no_exconfig,
        force=args.force,
        fetch_dependencies=args.install,
    )
    materializer = ProjectMaterializer(
        ElixirModuleLookup(settings.elixir_executable),
        ConsolePrompt(),
        MixDependencyFetcher(settings.mix_executable),
        _toolchain(args, settings),
        settings=settings,
    )
    materializer.generate(request)
    return 0


def main(argv: Sequence[str] | None = None, env: Mapping[str, str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    settings = GeneratorSettings.from_env(env if env is not None else os.environ)

    try:
        if args.command == "new":
            return _handle_new(args, settings)
    except GenerationError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    parser.error("no command provided")
    return 2


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
