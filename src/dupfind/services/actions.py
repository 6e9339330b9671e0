"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

services/actions.py
Turns confirmed groups of identical files into observable effects:
    - list:   print the group
    - link:   replace every duplicate with a hard link to the master
    - delete: ask the operator which files to keep, remove the others
"""
import logging
import sys
from enum import Enum
from typing import List, Optional, TextIO

from dupfind.core.models import (
    DeleteDecision, Disposition, DupfindParams, EquivalenceGroup, RunStats, format_record)
from dupfind.core.interfaces import GroupAction
from dupfind.services.file_service import FileService

logger = logging.getLogger(__name__)

GO_AHEAD_TOKEN = "go"


class ListAction(GroupAction):
    """Prints each group, one path per line or all on one line."""

    def __init__(self, params: DupfindParams, output: Optional[TextIO] = None):
        self.params = params
        self.output = output or sys.stdout

    def format_group(self, group: EquivalenceGroup) -> str:
        files = group.duplicates if self.params.omit_first else group.files
        names = [format_record(f, self.params.show_size) for f in files]
        if self.params.same_line:
            return " ".join(names) + "\n"
        return "".join(f"{name}\n" for name in names) + "\n"

    def apply(self, group: EquivalenceGroup) -> None:
        self.output.write(self.format_group(group))
        self.output.flush()


class LinkAction(GroupAction):
    """Makes every duplicate a hard link to the master's storage."""

    def __init__(self, stats: Optional[RunStats] = None):
        self.stats = stats if stats is not None else RunStats()

    def apply(self, group: EquivalenceGroup) -> None:
        for duplicate in group.duplicates:
            try:
                FileService.replace_with_link(group.master.path, duplicate.path)
            except RuntimeError as e:
                logger.warning(str(e))
                self.stats.action_failures += 1
                continue  # Continue with next duplicate
            logger.info(f"linked '{duplicate.path}' to '{group.master.path}'")
            self.stats.files_linked += 1


class SessionState(Enum):
    LISTING = "listing"
    AWAIT_INPUT = "await-input"
    TOGGLE = "toggle"
    EXECUTE = "execute"
    ABORT = "abort"
    DONE = "done"


class DeleteSession:
    """
    Interactive disposition of one group.

    The master starts as kept, every duplicate starts marked for deletion.
    Typing an entry's number toggles it, typing 'go' removes everything still
    marked, end of input leaves the group untouched.
    """

    def __init__(
            self,
            group: EquivalenceGroup,
            input_stream: TextIO,
            output: TextIO,
            use_trash: bool = False,
            stats: Optional[RunStats] = None,
    ):
        self.group = group
        self.input_stream = input_stream
        self.output = output
        self.use_trash = use_trash
        self.stats = stats if stats is not None else RunStats()
        self.decisions: List[DeleteDecision] = [DeleteDecision(group.master, keep=True)]
        self.decisions += [DeleteDecision(d, keep=False) for d in group.duplicates]
        self.state = SessionState.LISTING
        self._selected: Optional[int] = None

    def run(self) -> SessionState:
        """Runs the session to a terminal state (DONE or ABORT) and returns it."""
        while self.state not in (SessionState.DONE, SessionState.ABORT):
            if self.state == SessionState.LISTING:
                self._render()
                self.state = SessionState.AWAIT_INPUT
            elif self.state == SessionState.AWAIT_INPUT:
                self.state = self._read_command()
            elif self.state == SessionState.TOGGLE:
                self.decisions[self._selected - 1].toggle()
                self.state = SessionState.LISTING
            elif self.state == SessionState.EXECUTE:
                self._execute()
                self.state = SessionState.DONE
        return self.state

    def _render(self) -> None:
        out = self.output
        out.write(f"\nDisposition of files with digest {self.group.digest}\n\n")
        for number, decision in enumerate(self.decisions, 1):
            mark = "*" if decision.keep else " "
            out.write(f"{number:5d} {mark} {decision.record.path} ({decision.record.link_count} links)\n")
        out.write("\nFiles marked (*) will be kept - the rest deleted\n"
                  "To toggle a file's status type its number\n"
                  f"Type '{GO_AHEAD_TOKEN}' to go ahead with the delete\n")

    def _read_command(self) -> SessionState:
        self.output.write("\n> ")
        self.output.flush()
        line = self.input_stream.readline()
        if not line:
            self.output.write("*** EOF *** no action taken\n")
            return SessionState.ABORT

        command = line.strip()
        if command == GO_AHEAD_TOKEN:
            return SessionState.EXECUTE

        try:
            number = int(command)
        except ValueError:
            number = 0
        if number <= 0:
            self.output.write(f"invalid input - please type a number or '{GO_AHEAD_TOKEN}'\n")
            return SessionState.AWAIT_INPUT
        if number > len(self.decisions):
            self.output.write(f"no file number {number}\n")
            return SessionState.AWAIT_INPUT

        self._selected = number
        return SessionState.TOGGLE

    def _execute(self) -> None:
        for decision in self.decisions:
            if decision.keep:
                continue
            path = decision.record.path
            try:
                FileService.remove(path, use_trash=self.use_trash)
            except RuntimeError as e:
                logger.warning(str(e))
                self.stats.action_failures += 1
                continue
            self.output.write(f"{path} deleted\n")
            self.stats.files_deleted += 1
        self.output.flush()


class DeleteAction(GroupAction):
    """Runs one interactive DeleteSession per group."""

    def __init__(
            self,
            params: DupfindParams,
            input_stream: Optional[TextIO] = None,
            output: Optional[TextIO] = None,
            stats: Optional[RunStats] = None,
    ):
        self.params = params
        self.input_stream = input_stream or sys.stdin
        self.output = output or sys.stdout
        self.stats = stats if stats is not None else RunStats()

    def apply(self, group: EquivalenceGroup) -> None:
        session = DeleteSession(
            group,
            input_stream=self.input_stream,
            output=self.output,
            use_trash=self.params.use_trash,
            stats=self.stats,
        )
        if session.run() == SessionState.ABORT:
            logger.info(f"no files deleted for group of {group.master.path}")


class ActionDispatcher:
    """
    Applies the configured disposition to every group, strictly in order.
    """

    def __init__(
            self,
            params: DupfindParams,
            input_stream: Optional[TextIO] = None,
            output: Optional[TextIO] = None,
            stats: Optional[RunStats] = None,
    ):
        self.params = params
        self.stats = stats if stats is not None else RunStats()
        self.action = self._build_action(params, input_stream, output)

    def _build_action(self, params: DupfindParams, input_stream, output) -> GroupAction:
        """Builds the action matching the configured disposition."""
        if params.disposition == Disposition.LINK:
            return LinkAction(stats=self.stats)
        if params.disposition == Disposition.DELETE:
            return DeleteAction(params, input_stream=input_stream, output=output, stats=self.stats)
        return ListAction(params, output=output)

    def dispatch(self, group: EquivalenceGroup) -> None:
        self.stats.record_group(group)
        self.action.apply(group)
