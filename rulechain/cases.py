"""
Ordered case storage and replay.

A CaseList holds (predicate, action) pairs in the order they were added
and replays them on run(). Every matching case fires; there is no
first-match-wins behaviour.

Failure policy is fail-fast: an exception from a predicate or action is
logged with the case index and re-raised unchanged, so the remaining cases
of that run are not visited. Actions that already fired stay fired.

Not thread-safe. Appending while another thread runs the same list must be
serialized by the caller.
"""

from __future__ import annotations

from typing import Iterator

from .config import get_config
from .types import Action, Case, CaseTrace, Predicate, RunTrace
from .utils.logger import get_logger


class CaseList:
    """
    Append-only sequence of Cases.

    Example:
        cases = CaseList()
        cases.append(lambda: total > 100, notify, label="total > 100")
        cases.run()
    """

    def __init__(self):
        self._cases: list[Case] = []

    def __len__(self) -> int:
        return len(self._cases)

    def __iter__(self) -> Iterator[Case]:
        return iter(tuple(self._cases))

    def append(self, predicate: Predicate, action: Action, label: str = "") -> None:
        """Add a case at the tail. Predicate and action are not validated."""
        self._cases.append(Case(predicate=predicate, action=action, label=label))

    def run(self) -> None:
        """
        Evaluate every case in insertion order and fire the ones that match.

        Predicates are evaluated lazily, one case at a time, so an action can
        change the outcome of later predicates in the same run.

        Raises:
            Whatever a predicate or action raises (fail-fast).
        """
        logger = get_logger()
        trace_runs = get_config().run.trace_runs

        # Index loop so cases appended by an action are visited in this run
        index = 0
        while index < len(self._cases):
            case = self._cases[index]
            try:
                if case.predicate():
                    case.action()
                    logger.case("FIRED", index, case.label)
                elif trace_runs:
                    logger.case("SKIPPED", index, case.label)
            except Exception as e:
                logger.case("FAILED", index, case.label, error=type(e).__name__)
                raise
            index += 1

    def evaluate(self) -> RunTrace:
        """
        Dry run: evaluate every predicate without firing any action.

        Returns:
            RunTrace with one CaseTrace per case, in insertion order
        """
        trace = RunTrace()
        for index, case in enumerate(tuple(self._cases)):
            trace.case_traces.append(CaseTrace(
                case_index=index,
                label=case.label,
                matched=bool(case.predicate()),
            ))
        return trace
