import logging
import os
import sys
from pathlib import Path
from typing import Optional

from tomdoc.app import TomdocApp
from tomdoc.config import TomdocConfig, load_config_from_path
from tomdoc.spec import OutputFormat


def get_project_root() -> Path:
    return Path.cwd()


def stdin_is_tty() -> bool:
    return sys.stdin.isatty()


def configure_logging(verbose: bool = False) -> None:
    debug = verbose or bool(os.getenv("TOMDOC_DEBUG"))
    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
    logging.getLogger("tomdoc").setLevel(logging.DEBUG if debug else logging.WARNING)


def make_config(
    fmt: Optional[OutputFormat] = None, access: Optional[str] = None
) -> TomdocConfig:
    # Command line options win over [tool.tomdoc] in pyproject.toml.
    config = load_config_from_path(get_project_root())
    if fmt is not None:
        config.format = fmt
    if access:
        config.access = access
    return config


def make_app(config: TomdocConfig) -> TomdocApp:
    return TomdocApp(config=config)
