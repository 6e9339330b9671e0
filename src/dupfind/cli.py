#!/usr/bin/env python3
"""
dupfind CLI — find duplicate files and list, hard link or interactively delete them.

Results (listings, delete prompts) go to stdout; warnings and errors go to stderr
through logging, so scripts reading the output never see diagnostics.
"""
from __future__ import annotations  # Enable postponed evaluation of annotations (PEP 563)
import argparse
import logging
import os
import sys
from typing import List, NoReturn, Optional, TextIO

from dupfind import __version__
from dupfind.core.models import ConfigurationError, Disposition, DupfindParams, RunStats
from dupfind.commands import DupfindCommand

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(levelname)-8s | %(name)-25s | %(message)s"

EPILOG_TEXT = """
Examples:
  List duplicate files below the current directory
  %(prog)s -r .

  Same as above, one group per line, with sizes, without empty files
  %(prog)s -r -n -1 -S ~/Downloads

  Replace duplicates with hard links to a single copy
  %(prog)s -r -l ~/photos

  Choose interactively which copies to delete (moved to the trash)
  %(prog)s -r -d -t ~/music

  Take file names from another program
  find ~ -name '*.iso' | %(prog)s -i
"""


class CLIApplication:
    """Main CLI application controller."""

    def __init__(self, input_stream: Optional[TextIO] = None, output: Optional[TextIO] = None):
        self.input_stream = input_stream
        self.output = output
        self.verbose: bool = False
        self.quiet: bool = False

    @staticmethod
    def parse_args(args=None) -> argparse.Namespace:
        """Parse command-line arguments."""
        parser = argparse.ArgumentParser(
            prog="dupfind",
            description="Find duplicate files and list or operate upon them",
            formatter_class=argparse.RawTextHelpFormatter,
            epilog=EPILOG_TEXT
        )

        parser.add_argument(
            "paths",
            nargs="*",
            metavar="file|directory",
            help="Files or directories to search for duplicates"
        )

        # Input options
        parser.add_argument(
            "--recurse", "-r",
            action="store_true",
            help="Include files residing in subdirectories"
        )
        parser.add_argument(
            "--symlinks", "-s",
            action="store_true",
            help="Follow symbolic links"
        )
        parser.add_argument(
            "--stdin", "-i",
            action="store_true",
            dest="read_stdin",
            help="Read file names from stdin as well as processing\n"
                 "any specified on the command line"
        )

        # Matching options
        parser.add_argument(
            "--hardlinks", "-H",
            action="store_true",
            help="Normally, when two or more files point to the same\n"
                 "disk area they are treated as non-duplicates; this\n"
                 "option changes this behaviour"
        )
        parser.add_argument(
            "--noempty", "-n",
            action="store_true",
            help="Exclude zero-length files from consideration"
        )

        # Listing options
        parser.add_argument(
            "--sameline", "-1",
            action="store_true",
            help="List each set of matches on a single line"
        )
        parser.add_argument(
            "--omitfirst", "-f",
            action="store_true",
            help="Omit the first file in each set of matches"
        )
        parser.add_argument(
            "--size", "-S",
            action="store_true",
            dest="show_size",
            help="Show size of duplicate files"
        )

        # Actions
        parser.add_argument(
            "--delete", "-d",
            action="store_true",
            help="For each set of duplicate files prompt for the\n"
                 "files to preserve and delete all others"
        )
        parser.add_argument(
            "--link", "-l",
            action="store_true",
            help="For each set of duplicate files make all the\n"
                 "filenames hard links to the same disk storage"
        )
        parser.add_argument(
            "--trash", "-t",
            action="store_true",
            help="With --delete, move files to the system trash\n"
                 "instead of removing them"
        )

        # Output options
        parser.add_argument(
            "--quiet", "-q",
            action="store_true",
            help="Suppress progress and repeated-name warnings"
        )
        parser.add_argument(
            "--verbose", "-v",
            action="store_true",
            help="Show progress messages and statistics"
        )
        parser.add_argument(
            "--version", "-V",
            action="version",
            version=f"%(prog)s {__version__}",
            help="Display dupfind version"
        )

        return parser.parse_args(args)

    def create_params(self, args: argparse.Namespace) -> DupfindParams:
        """Create DupfindParams from CLI arguments."""
        try:
            return DupfindParams.from_flags(
                paths=args.paths,
                link=args.link,
                delete=args.delete,
                read_stdin=args.read_stdin,
                recurse=args.recurse,
                follow_symlinks=args.symlinks,
                hard_links_distinct=args.hardlinks,
                include_empty=not args.noempty,
                same_line=args.sameline,
                omit_first=args.omitfirst,
                show_size=args.show_size,
                use_trash=args.trash,
                quiet=args.quiet,
                verbose=args.verbose,
            )
        except ConfigurationError as e:
            self.error_exit(str(e))

    def configure_logging(self) -> None:
        """Diagnostics go to stderr; --verbose adds progress-level messages."""
        level = logging.INFO if self.verbose else logging.WARNING
        logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr, force=True)

    def validate_params(self, params: DupfindParams) -> None:
        """Warn about combinations that are allowed but rarely intended."""
        if params.disposition == Disposition.DELETE and params.read_stdin and self.input_stream is None:
            logger.warning(
                "file names are read from stdin; delete prompts will see end of input "
                "and leave every group untouched"
            )

    def progress_callback(self, stage: str, current: int, total: Optional[int]) -> None:
        """CLI progress callback - shows progress in console."""
        if self.quiet or not self.verbose:
            return

        if total and total > 0:
            percent = (current / total) * 100
            sys.stderr.write(f"\r  [{stage}] {current}/{total} ({percent:.1f}%)")
        else:
            sys.stderr.write(f"\r  [{stage}] {current} files processed...")
        if current == total:
            sys.stderr.write("\n")
        sys.stderr.flush()

    def run_search(self, params: DupfindParams) -> RunStats:
        """Execute the duplicate search workflow."""
        command = DupfindCommand(input_stream=self.input_stream, output=self.output)
        logger.info(f"Disposition: {params.disposition.display_name}")
        stats = command.execute(
            params,
            progress_callback=self.progress_callback if self.verbose else None,
        )
        if self.verbose:
            sys.stderr.write("\n" + stats.print_summary() + "\n")
        return stats

    @staticmethod
    def error_exit(message: str, code: int = 1) -> NoReturn:
        """Print error and exit."""
        print(f"❌ Error: {message}", file=sys.stderr)
        sys.exit(code)

    def run(self, argv: Optional[List[str]] = None) -> int:
        """Main entry point. Returns the process exit status."""
        args = self.parse_args(argv)
        self.verbose = args.verbose
        self.quiet = args.quiet

        self.configure_logging()
        params = self.create_params(args)
        self.validate_params(params)

        stats = self.run_search(params)
        return 1 if stats.registry_failures else 0


def main() -> None:
    """Application entry point."""
    app = CLIApplication()
    try:
        sys.exit(app.run())
    except KeyboardInterrupt:
        print("\n⚠️  Operation cancelled by user (Ctrl+C)", file=sys.stderr)
        sys.exit(130)
    except Exception as e:
        if os.environ.get("DEBUG"):
            raise
        print(f"❌ Unexpected error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
