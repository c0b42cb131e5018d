# simulate an automaton on a word by tracking every live state at once
import logging
from dataclasses import dataclass, field
from enum import Enum, unique
from typing import Iterable, List, Set

if __name__ == '__main__':
    import os
    import sys
    SCRIPT_DIR = os.path.dirname(os.path.abspath(__file__))
    sys.path.append(os.path.dirname(SCRIPT_DIR))

from automata.automaton import Automaton
from automata.utils import State, Input, StateSet, state_set_name

logger = logging.getLogger(__name__)


@unique
class Verdict(Enum):
    ACCEPTED = 'accepted'
    REJECTED = 'rejected'

    def __bool__(self) -> bool:
        return self is Verdict.ACCEPTED


@dataclass
class Run:
    word: str
    # live state set before the first symbol and after each consumed symbol,
    # stops at the first empty set
    steps: List[StateSet] = field(default_factory=list)
    verdict: Verdict = Verdict.REJECTED

    @property
    def accepted(self) -> bool:
        return bool(self.verdict)

    @property
    def final_states(self) -> StateSet:
        return self.steps[-1] if len(self.steps) != 0 else frozenset()


def step(automaton: Automaton, current: Iterable[State],
         symbol: Input) -> StateSet:
    '''
    union of the destinations of every live state on `symbol`, a state
    without such a transition drops out
    '''
    res: Set[State] = set()
    for state in current:
        res.update(automaton.transitions_from(state, symbol))
    return frozenset(res)


def simulate(automaton: Automaton, word: Iterable[Input]) -> Run:
    symbols = list(word)
    run = Run(''.join(symbols))
    current = automaton.initial_states
    run.steps.append(current)
    for pos, symbol in enumerate(symbols):
        current = step(automaton, current, symbol)
        run.steps.append(current)
        if len(current) == 0:
            # nothing can leave the empty set, the rest of the word is irrelevant
            logger.debug('no live state left after %d of %d symbols of %r',
                         pos + 1, len(symbols), run.word)
            break
    if len(current & automaton.terminal_states) != 0:
        run.verdict = Verdict.ACCEPTED
    return run


def accepts(automaton: Automaton, word: Iterable[Input]) -> bool:
    return simulate(automaton, word).accepted


def main():
    automaton = Automaton()
    automaton.add_state('0', is_initial=True)
    automaton.add_state('B')
    automaton.add_state('C')
    automaton.add_state('1', is_terminal=True)
    automaton.add_transition('0', 'a', 'B')
    automaton.add_transition('0', 'a', 'C')
    automaton.add_transition('B', 'b', 'B')
    automaton.add_transition('C', 'c', 'C')
    automaton.add_transition('B', 'a', '1')
    automaton.add_transition('C', 'a', '1')
    print(automaton)
    for word in ['aa', 'abba', 'acca', 'abca']:
        run = simulate(automaton, word)
        print(f'{word}: {run.verdict.value}')
        print(' -> '.join(map(state_set_name, run.steps)))


if __name__ == '__main__':
    main()
