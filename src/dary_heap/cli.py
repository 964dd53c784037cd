import argparse
import logging
import sys
from typing import Callable, Optional, TextIO

from src.dary_heap.dary_heap import DaryHeap
from src.dary_heap.exceptions import (
    HeapError,
    HeapUnderflowError,
    InvalidDegreeError,
)

logger = logging.getLogger(__name__)

DEGREE_PROMPT = "Enter the degree of the d-ary heap (must be at least 2): "

MENU = (
    "",
    "Choose an action:",
    "1. Insert element",
    "2. Extract maximum element",
    "3. Build Max-Heap",
    "4. Increase Key",
    "5. Delete Key",
    "6. Print Heap by Depth",
    "7. Exit",
)

EXIT_CHOICE = 7


class HeapShell:
    """
    Line-oriented menu driving a single DaryHeap.

    Every prompt expects one integer per line. End of input ends the session
    the same way choosing "Exit" does.
    """

    def __init__(
        self,
        stdin: TextIO,
        stdout: TextIO,
        degree: Optional[int] = None
    ) -> None:
        self.stdin = stdin
        self.stdout = stdout
        self.degree = degree
        self.heap: Optional[DaryHeap] = None
        self.actions: dict[int, Callable[[], None]] = {
            1: self.insert,
            2: self.extract_max,
            3: self.build_heap,
            4: self.increase_key,
            5: self.delete,
            6: self.print_heap,
        }

    def write(self, message: str = "", end: str = "\n") -> None:
        print(message, end=end, file=self.stdout)

    def read_int(self, prompt: str) -> int:
        """Prompt until a line holding an integer is read."""
        while True:
            self.write(prompt, end="")
            self.stdout.flush()
            line = self.stdin.readline()
            if not line:
                raise EOFError("no more input")
            try:
                return int(line.strip())
            except ValueError:
                self.write("Please enter a valid integer.")

    def run(self) -> int:
        try:
            self.heap = self.create_heap()
            while True:
                self.write("\n".join(MENU))
                choice = self.read_int("")
                if choice == EXIT_CHOICE:
                    self.write("Exiting program. Bye!")
                    return 0

                action = self.actions.get(choice)
                if action is None:
                    self.write("Invalid choice. Please try again.")
                    continue

                logger.debug("Running menu action %d", choice)
                try:
                    action()
                except HeapError as e:
                    logger.info("Menu action %d failed: %s", choice, e)
                    self.write(str(e))
        except EOFError:
            logger.debug("Input exhausted, leaving the menu")
            return 0

    def create_heap(self) -> DaryHeap:
        degree = self.degree
        while True:
            if degree is None:
                degree = self.read_int(DEGREE_PROMPT)
            try:
                heap = DaryHeap(degree)
            except InvalidDegreeError as e:
                self.write(str(e))
                degree = None
                continue
            self.degree = degree
            logger.debug("Created an empty heap of degree %d", degree)
            return heap

    def insert(self) -> None:
        key = self.read_int("Enter the element to insert: ")
        self.heap.max_heap_insert(key)

    def extract_max(self) -> None:
        try:
            self.write(f"Extracted max element: {self.heap.extract_max()}")
        except HeapUnderflowError as e:
            self.write(str(e))

    def build_heap(self) -> None:
        count = self.read_int("Enter the number of elements for the new heap: ")
        if count < 0:
            self.write("Number of elements must be non-negative")
            return

        elements = [
            self.read_int(f"Enter element {i + 1}: ")
            for i in range(count)
        ]
        if not elements:
            self.write("List of elements cannot be empty")
            return

        self.heap = DaryHeap.from_elements(elements, self.degree)
        logger.debug("Rebuilt the heap from %d elements", len(elements))

    def increase_key(self) -> None:
        index = self.read_int(
            "Enter the index of the element to increase key: "
        )
        new_key = self.read_int("Enter the new key value: ")
        self.heap.heap_increase_key(index, new_key)

    def delete(self) -> None:
        index = self.read_int("Enter the index of the key you want to delete: ")
        self.heap.delete(index)
        self.write(
            f"\nThe updated heap after removing the node at index "
            f"'{index}' is: "
        )
        self.print_heap()
        self.write()

    def print_heap(self) -> None:
        self.heap.print_heap_by_depth(file=self.stdout)


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="dary-heap",
        description="Interactive menu over a D-ary max heap."
    )
    parser.add_argument(
        "-d", "--degree",
        type=int,
        default=None,
        help="branching factor of the heap; prompted for when omitted"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging threshold, by default WARNING"
    )
    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> int:
    """Entry point of the `dary-heap` console script."""
    args = parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
        stream=sys.stderr
    )
    return HeapShell(sys.stdin, sys.stdout, degree=args.degree).run()


if __name__ == "__main__":
    sys.exit(main())
