"""Recorded key steps and level results, stored in plain text files."""

from collections import deque
from dataclasses import dataclass, field
from enum import IntEnum
from itertools import islice


def _read_tokens(filename):
    try:
        with open(filename, encoding="utf-8") as fh:
            return fh.read().split()
    except OSError:
        return []


@dataclass
class Steps:
    """The random seed of a run and the keys pressed, keyed by loop iteration."""

    random_seed: int = 0
    steps: deque = field(default_factory=deque)

    @classmethod
    def load(cls, filename):
        """Read steps from a file; a missing file yields an empty record."""
        loaded = cls()
        tokens = iter(_read_tokens(filename))
        seed = next(tokens, None)
        if seed is None:
            return loaded
        loaded.random_seed = int(seed)
        count = max(int(next(tokens, "0")), 0)
        for iteration, step in islice(zip(tokens, tokens), count):
            loaded.add_step(int(iteration), step)
        return loaded

    def save(self, filename):
        lines = [str(self.random_seed), str(len(self.steps))]
        lines.extend(f"{iteration} {step}" for iteration, step in self.steps)
        with open(filename, "w", encoding="utf-8") as fh:
            fh.write("\n".join(lines))

    def pop_step(self):
        """Remove and return the next step's keys, or '' when none remain."""
        if not self.steps:
            return ""
        return self.steps.popleft()[1]

    def add_step(self, iteration, step):
        self.steps.append((iteration, step))

    def is_next_step_on(self, iteration):
        return bool(self.steps) and self.steps[0][0] == iteration


class ResultState(IntEnum):
    STRIKE = 0
    FINISHED = 1
    NO_RESULT = 2


@dataclass
class Results:
    """Events of a level run (strikes and finish) and its final score."""

    events: deque = field(default_factory=deque)
    score: int = 0

    @classmethod
    def load(cls, filename):
        """Read results from a file; a missing file yields an empty record."""
        loaded = cls()
        tokens = iter(_read_tokens(filename))
        count = max(int(next(tokens, "0")), 0)
        for iteration, state in islice(zip(tokens, tokens), count):
            loaded.add_result(int(iteration), ResultState(int(state)))
        score = next(tokens, None)
        if score is not None:
            loaded.score = int(score)
        return loaded

    def save(self, filename):
        lines = [str(len(self.events))]
        lines.extend(f"{iteration} {int(state)}" for iteration, state in self.events)
        lines.append(str(self.score))
        with open(filename, "w", encoding="utf-8") as fh:
            fh.write("\n".join(lines))

    def add_result(self, iteration, state):
        self.events.append((iteration, ResultState(state)))

    def pop_result(self):
        """Remove and return the first event, or (0, NO_RESULT) when none remain."""
        if not self.events:
            return (0, ResultState.NO_RESULT)
        return self.events.popleft()

    def is_past_next_strike(self, iteration):
        """True if the next expected strike should already have happened."""
        if self.events:
            first_iteration, state = self.events[0]
            if state is ResultState.FINISHED:
                return False
            if state is ResultState.STRIKE and iteration <= first_iteration:
                return False
        return True

    def matches_finish_iteration(self, iteration):
        return (
            bool(self.events)
            and self.events[-1][1] is ResultState.FINISHED
            and self.events[-1][0] == iteration
        )

    def is_finished_by(self, iteration):
        """True if the recorded run had already ended before this iteration."""
        return not self.events or self.events[-1][0] < iteration

    def ends_with_finish(self):
        return bool(self.events) and self.events[-1][1] is ResultState.FINISHED