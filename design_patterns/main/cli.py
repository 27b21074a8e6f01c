import argparse
from collections.abc import Callable, Sequence
from concurrent.futures import ThreadPoolExecutor
import json

from design_patterns.auth.factory import auth_factory
from design_patterns.core.errors.exceptions import CoreException
from design_patterns.core.errors.handlers import (
    error_type_for,
    format_error_response,
    format_log_message,
)
from design_patterns.core.patterns.singleton import get_singleton
from design_patterns.main.config import Config, get_settings
from design_patterns.options.server_config import new_config, set_addr, set_db_uri
from design_patterns.prototype.nodes import File, Folder
from loggers import get_logger

logger = get_logger(__name__)
response_logger = get_logger("design_patterns.cli.error_response", plain_format=True)

BORDER_WIDTH = 80


def border(name: str) -> None:
    print("=" * BORDER_WIDTH)
    print("\t", name)
    print("=" * BORDER_WIDTH)


def run_singleton(settings: Config, workers: int | None = None) -> None:
    border("Singleton")
    workers = workers or settings.demo.SINGLETON_WORKERS

    def access(_: int) -> str:
        return f"Singleton: {id(get_singleton()):#x}"

    with ThreadPoolExecutor(max_workers=workers) as pool:
        for line in pool.map(access, range(workers)):
            print(line)


def build_sample_tree() -> Folder:
    return Folder(
        "root",
        [
            File("file1"),
            File("file2"),
            Folder("subfolder", [File("file3"), File("file4")]),
        ],
    )


def run_prototype(settings: Config) -> None:
    border("Prototype")
    indent = settings.demo.INDENT_WIDTH
    folder = build_sample_tree()
    print(f"Original:\n{folder.render(indent_width=indent)}")

    clone = folder.clone()
    print(f"Clone:\n{clone.render(indent_width=indent)}")


def run_func_opts(settings: Config) -> None:
    border("FuncOpts")
    print(new_config(set_addr("Some addr"), set_db_uri("db uri")))


def run_abstract_factory(settings: Config) -> None:
    border("Abstract Factory")
    for name in settings.demo.DEFAULT_AUTH_PROVIDERS:
        provider = auth_factory(name)
        title = name.capitalize()
        if str(provider.new_customer()) == f"Customer: {title} Customer":
            print(f"{name} customer is ok")
        if str(provider.new_seller()) == f"Seller: {title} Seller":
            print(f"{name} seller is ok")


SECTIONS: dict[str, Callable[[Config], None]] = {
    "singleton": run_singleton,
    "prototype": run_prototype,
    "funcopts": run_func_opts,
    "factory": run_abstract_factory,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="design-patterns",
        description="Walk through the singleton, prototype, functional options "
        "and abstract factory examples.",
    )
    parser.add_argument(
        "--section",
        action="append",
        choices=list(SECTIONS),
        help="Run only the given section (repeatable). Runs all by default.",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Number of threads racing for the singleton.",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    if args.workers is not None and args.workers <= 0:
        build_parser().error("--workers must be a positive integer")

    settings = get_settings()
    sections = args.section or list(SECTIONS)

    try:
        for section in sections:
            if section == "singleton":
                run_singleton(settings, args.workers)
            else:
                SECTIONS[section](settings)
    except CoreException as e:
        error_type = error_type_for(e)
        logger.error(format_log_message(error_type, e.message, e.additional_info))
        response_logger.error(
            json.dumps(format_error_response(error_type, e.message))
        )
        return 1

    return 0
