"""CLI entrypoint: parse flags into a DownloadRequest and run one download.
"""
import argparse
import asyncio
import sys

import structlog
from rich.console import Console
from rich.text import Text

from . import __version__
from .config import Config
from .downloader import Content, GitFileDownloader
from .errors import GitFileError
from .logging_config import configure_logging

logger = structlog.get_logger(__name__)


def _build_parser():
    p = argparse.ArgumentParser(prog="gitfile", description="Download a raw file from Github or Gitlab")
    p.add_argument("repository", nargs="?", help="repository identifier (owner/repository)")
    p.add_argument("file", nargs="?", help="path of the file inside the repository")
    p.add_argument("-V", "--version", action="version", version=__version__)
    p.add_argument("-p", "--provider", choices=["github", "gitlab"], default="github",
                   help='Set git provider: "github", "gitlab". Default to "github"')
    p.add_argument("-o", "--output", default=".", metavar="PATH",
                   help="Set the output directory. Default to current location.")
    p.add_argument("--stdout", action="store_true",
                   help="Print the file content instead of writing it.")
    p.add_argument("-k", "--keep-original-path", action="store_true",
                   help="Option to keep original path inside output directory. "
                        "By default, it will place the single file inside output directory.")
    p.add_argument("-b", "--branch", default="master", metavar="NAME",
                   help='Set the branch name. Default to "master".')
    p.add_argument("--github-basic-username", metavar="USERNAME", help="Set Github Basic Auth Username.")
    p.add_argument("--github-basic-password", metavar="PASSWORD", help="Set Github Basic Auth Password.")
    p.add_argument("--github-oauth-token", metavar="TOKEN", help="Set Github OAuth2 Token.")
    p.add_argument("--gitlab-private-token", metavar="TOKEN", help="Set Gitlab Private Token.")
    p.add_argument("--config", metavar="PATH", help="YAML file with defaults for the options above.")
    p.add_argument("--log-level", default=None, help="Logging level. Default to WARNING.")
    p.add_argument("--log-json", action="store_true", default=None, help="Render logs as JSON.")

    return p


def _print_error(console: Console, message: str) -> None:
    console.print(Text.assemble(("Error : ", "red"), (message, "bold red")), soft_wrap=True)


def main(argv=None):
    argv = argv if argv is not None else sys.argv[1:]
    console = Console(stderr=True)
    parser = _build_parser()

    # --config is read first so its defaults sit underneath explicit flags
    pre_args, _ = parser.parse_known_args(argv)
    try:
        config = Config(pre_args.config)
    except GitFileError as e:
        _print_error(console, str(e))
        return 1
    parser.set_defaults(**config.defaults)
    args = parser.parse_args(argv)

    log_level = args.log_level or config.logging.get("level", "WARNING")
    log_json = args.log_json if args.log_json is not None else bool(config.logging.get("json", False))
    configure_logging(log_level, log_json)

    for name in ("repository", "file"):
        if not getattr(args, name):
            console.print(Text(f"No <{name}> given!", style="bold red"), soft_wrap=True)
            parser.print_help()
            return 1

    options = {
        "provider": args.provider,
        "repository": args.repository,
        "branch": args.branch,
        "file": args.file,
        "output": None if args.stdout else args.output,
        "keep_original_path": args.keep_original_path,
        "private_token": args.gitlab_private_token,
        "oauth2_token": args.github_oauth_token,
        "basic_username": args.github_basic_username,
        "basic_password": args.github_basic_password,
    }

    try:
        downloader = GitFileDownloader(options)
        result = asyncio.run(downloader.run())
    except GitFileError as e:
        logger.debug("download_aborted", error_type=type(e).__name__)
        _print_error(console, str(e))
        return 1

    if isinstance(result, Content):
        sys.stdout.write(result.text)
    else:
        logger.info("download_finished", path=result.path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
