"""Interactive driver that exercises a string queue from a command script"""

import argparse
import io
import logging
import os
import shlex
import sys
from typing import Callable, Iterable, Optional, TextIO

from strqueue import api
from strqueue.collections import Queue
from strqueue.utils.util_logging import setup_debugger

logger = logging.getLogger(__name__)

HELP = """\
new                Create a new queue, freeing the current one
free               Free the current queue
ih STR [N]         Insert STR at the head N times (default 1)
it STR [N]         Insert STR at the tail N times (default 1)
rh [EXPECTED]      Remove from the head, optionally checking the value
rhq                Remove from the head without reporting the value
reverse            Reverse the queue
sort               Sort the queue in ascending order
size [EXPECTED]    Report the size, optionally checking it
show               Print the queue contents
help               Print this message
quit               Stop reading commands"""


class CommandError(Exception):
    """Malformed command"""


class Driver:
    """Executes queue commands one line at a time and counts failures."""

    def __init__(
        self,
        output: Optional[TextIO] = None,
        bufsize: int = 1024,
        trace: bool = False,
    ) -> None:
        self.output = output if output is not None else sys.stdout
        self.bufsize = bufsize
        self.queue: Optional[Queue] = None
        self.errors = 0
        self.tracer = setup_debugger(f"{__name__}.trace", disabled=not trace)
        self.commands: dict[str, Callable[[list[str]], None]] = {
            "new": self.do_new,
            "free": self.do_free,
            "ih": self.do_insert_head,
            "it": self.do_insert_tail,
            "rh": self.do_remove_head,
            "rhq": self.do_remove_head_quiet,
            "reverse": self.do_reverse,
            "sort": self.do_sort,
            "size": self.do_size,
            "show": self.do_show,
            "help": self.do_help,
        }

    def report(self, message: str) -> None:
        print(message, file=self.output)

    def fail(self, message: str) -> None:
        self.errors += 1
        logger.debug("Command failed: %s", message)
        self.report(f"ERROR: {message}")

    def execute(self, line: str) -> bool:
        """Run one command line. Return False once ``quit`` is read."""
        line = line.split("#", 1)[0].strip()
        if not line:
            return True
        self.tracer.debug("cmd> %s", line)
        try:
            name, *args = shlex.split(line)
        except ValueError as e:
            self.fail(f"Cannot parse '{line}': {e}")
            return True
        if name == "quit":
            return False
        command = self.commands.get(name)
        if command is None:
            self.fail(f"Unknown command '{name}'")
            return True
        try:
            command(args)
        except CommandError as e:
            self.fail(str(e))
        return True

    def run(self, lines: Iterable[str]) -> int:
        """Run every command line, then free the queue. Return the error count."""
        for line in lines:
            if not self.execute(line):
                break
        api.q_free(self.queue)
        self.queue = None
        return self.errors

    def _need_queue(self) -> Queue:
        if self.queue is None:
            raise CommandError("No queue, call 'new' first")
        return self.queue

    @staticmethod
    def _count(args: list[str], index: int) -> int:
        if len(args) <= index:
            return 1
        try:
            count = int(args[index])
        except ValueError as e:
            raise CommandError(f"Invalid count '{args[index]}'") from e
        if count < 1:
            raise CommandError(f"Count must be positive, got {count}")
        return count

    def _show(self) -> None:
        if self.queue is None:
            self.report("q = NULL")
        else:
            self.report(f"q = [{' '.join(self.queue.values())}]")

    def do_new(self, args: list[str]) -> None:
        api.q_free(self.queue)
        self.queue = api.q_new()
        if self.queue is None:
            raise CommandError("Could not allocate a queue")
        self._show()

    def do_free(self, args: list[str]) -> None:
        api.q_free(self.queue)
        self.queue = None
        self._show()

    def _insert(
        self, args: list[str], insert: Callable[[Optional[Queue], str], bool]
    ) -> None:
        if not args:
            raise CommandError("Missing string argument")
        value = args[0]
        count = self._count(args, 1)
        queue = self._need_queue()
        for _ in range(count):
            if not insert(queue, value):
                raise CommandError(f"Insertion of '{value}' failed")
        self._show()

    def do_insert_head(self, args: list[str]) -> None:
        self._insert(args, api.q_insert_head)

    def do_insert_tail(self, args: list[str]) -> None:
        self._insert(args, api.q_insert_tail)

    def do_remove_head(self, args: list[str]) -> None:
        queue = self._need_queue()
        ok, value = api.q_remove_head(queue, self.bufsize)
        if not ok:
            raise CommandError("Removal from an empty queue")
        self.report(f"Removed {value} from queue")
        if args and value != args[0]:
            self.fail(f"Removed value {value} != expected value {args[0]}")
        self._show()

    def do_remove_head_quiet(self, args: list[str]) -> None:
        queue = self._need_queue()
        ok, _ = api.q_remove_head(queue, 0)
        if not ok:
            raise CommandError("Removal from an empty queue")
        self._show()

    def do_reverse(self, args: list[str]) -> None:
        api.q_reverse(self._need_queue())
        self._show()

    def do_sort(self, args: list[str]) -> None:
        queue = self._need_queue()
        api.q_sort(queue)
        values = list(queue.values())
        for earlier, later in zip(values, values[1:]):
            if later < earlier:
                self.fail(f"Not sorted in ascending order: {earlier} > {later}")
                break
        self._show()

    def do_size(self, args: list[str]) -> None:
        size = api.q_size(self.queue)
        self.report(f"Queue size = {size}")
        if args:
            try:
                expected = int(args[0])
            except ValueError as e:
                raise CommandError(f"Invalid size '{args[0]}'") from e
            if size != expected:
                self.fail(f"Computed queue size as {size}, expected {expected}")

    def do_show(self, args: list[str]) -> None:
        self._show()

    def do_help(self, args: list[str]) -> None:
        self.report(HELP)


def main(parsed_args: argparse.Namespace) -> int:
    driver = Driver(bufsize=parsed_args.bufsize, trace=parsed_args.trace)
    if parsed_args.file is None:
        errors = driver.run(sys.stdin)
    else:
        with open(parsed_args.file, "r", encoding="utf-8") as command_file:
            errors = driver.run(command_file)
    if errors:
        logger.warning("%d command(s) failed", errors)
    return 1 if errors else 0


def run_script(script: str, bufsize: int = 1024) -> tuple[int, str]:
    """Run a command script and return the error count and printed output."""
    output = io.StringIO()
    errors = Driver(output, bufsize=bufsize).run(script.splitlines())
    return errors, output.getvalue()


if __name__ == "__main__":
    logging.basicConfig(level=os.environ.get("LOGLEVEL", "WARNING"))
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("-f", "--file", type=str, default=None)
    parser.add_argument("--bufsize", type=int, default=1024)
    parser.add_argument("--trace", action="store_true")
    args = parser.parse_args()
    sys.exit(main(args))
