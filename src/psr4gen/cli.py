import argparse

import loggi
from pathier import Pathier

from .errors import GenerationError
from .generator import CLASS_SKELETON, HandlerGenerator


def get_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="psr4gen",
        description="Create a request handler class in the directory its namespace autoloads from.",
    )

    parser.add_argument(
        "fqcn",
        type=str,
        help=""" The fully qualified name of the class to create, e.g. "App\\Handler\\PingHandler". """,
    )
    parser.add_argument(
        "-p",
        "--project_root",
        type=str,
        default=Pathier.cwd(),
        help=""" The directory containing composer.json. Defaults to the current working directory. """,
    )
    parser.add_argument(
        "-s",
        "--skeleton",
        type=str,
        default=None,
        help=""" Path to a template file to use instead of the built-in handler skeleton. """,
    )
    parser.add_argument(
        "-e",
        "--extension",
        type=str,
        default=".php",
        help=""" The file extension for the created class. Defaults to ".php". """,
    )
    parser.add_argument(
        "-m",
        "--manifest",
        type=str,
        default="composer.json",
        help=""" The manifest file name within the project root. """,
    )
    parser.add_argument(
        "-d",
        "--dry_run",
        action="store_true",
        help=""" Only report where the class would be written. """,
    )
    parser.add_argument(
        "-l",
        "--log_dir",
        type=str,
        default="logs",
        help=""" The directory to save the log to. """,
    )
    args = parser.parse_args(argv)
    args.project_root = Pathier(args.project_root)

    return args


def main(args: argparse.Namespace | None = None):
    if not args:
        args = get_args()
    logger = loggi.getLogger("psr4gen", args.log_dir)
    try:
        try:
            skeleton = (
                Pathier(args.skeleton).read_text() if args.skeleton else CLASS_SKELETON
            )
        except OSError as e:
            logger.error(f"skeleton: Unable to read `{args.skeleton}`: {e}")
            print(f"Unable to read the skeleton file `{args.skeleton}`.")
            raise SystemExit(1)
        generator = HandlerGenerator(
            skeleton, args.project_root, args.extension, args.manifest
        )
        if args.dry_run:
            resolved = generator.get_class_path(args.fqcn)
            logger.logprint(f"`{resolved.fqcn}` would be created at `{resolved.path}`.")
        else:
            path = generator.process(args.fqcn)
            logger.logprint(f"Created `{args.fqcn}` at `{path}`.")
    except GenerationError as e:
        logger.error(f"{e.code}: {e.message}")
        print(e.message)
        raise SystemExit(1)
    finally:
        logger.close()


if __name__ == "__main__":
    main(get_args())
