import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List
from prettytable import PrettyTable

if __name__ == '__main__':
    import os
    import sys
    SCRIPT_DIR = os.path.dirname(os.path.abspath(__file__))
    sys.path.append(os.path.dirname(SCRIPT_DIR))

from automata.utils import (STATE_PREFIX, State, Input, StateSet,
                            NameAllocator, Oslash, state_name, state_set_name)
from automata.automaton import Automaton
from automata.acceptance import step

logger = logging.getLogger(__name__)


@dataclass
class SubsetConstruction:
    dfa: Automaton
    # origin state set -> dfa state, one entry per dfa state
    state_map: Dict[StateSet, State] = field(default_factory=dict)

    def origin(self, state: State) -> StateSet:
        for nfa_states, dfa_state in self.state_map.items():
            if dfa_state == state:
                return nfa_states
        raise KeyError(state)

    def label(self, nfa_states: Iterable[State]) -> State:
        return self.state_map[frozenset(nfa_states)]

    def table(self) -> PrettyTable:
        inputs = self.dfa.alphabet
        table = PrettyTable(['NFA STATE', 'DFA STATE', *inputs])
        for nfa_states, dfa_state in self.state_map.items():
            row = [state_set_name(nfa_states), dfa_state]
            for _input in inputs:
                targets = self.dfa.transitions_from(dfa_state, _input)
                row.append(Oslash if len(targets) ==
                           0 else ','.join(map(state_name, targets)))
            table.add_row(row)
        return table


def move(nfa: Automaton, states: Iterable[State], _input: Input) -> StateSet:
    return step(nfa, states, _input)


def subset_construction(nfa: Automaton,
                        prefix: str = STATE_PREFIX) -> SubsetConstruction:
    """
    convert nfa to dfa using subset construction algorithm

    every dfa state stands for the set of nfa states reachable on the same
    word, the map is keyed by frozenset so that a set reached along
    different paths (in whatever order) always resolves to one state.
    the source automaton is only read.
    """
    state_allocator = NameAllocator(prefix)
    inputs = nfa.alphabet
    terminal_states = nfa.terminal_states
    dfa = Automaton()
    result = SubsetConstruction(dfa)
    stack: List[StateSet] = []

    def resolve(nfa_states: StateSet) -> State:
        dfa_state = result.state_map.get(nfa_states)
        if dfa_state is None:
            dfa_state = state_allocator.next
            result.state_map[nfa_states] = dfa_state
            dfa.add_state(dfa_state,
                          is_terminal=len(nfa_states & terminal_states) != 0)
            stack.append(nfa_states)
            logger.debug('new dfa state %s for %s', dfa_state,
                         state_set_name(nfa_states))
        return dfa_state

    # with no initial state this is the empty set, which is kept as a
    # non-terminal state without transitions
    initial_states = frozenset(nfa.initial_states)
    start_state = resolve(initial_states)
    dfa.add_state(start_state, is_initial=True)

    # a state set is pushed exactly once, when it gets its name
    while len(stack) != 0:
        curr = stack.pop(-1)
        _current = result.state_map[curr]
        for _input in inputs:
            target = move(nfa, curr, _input)
            if len(target) == 0:
                continue
            _target = resolve(target)
            dfa.add_transition(_current, _input, _target)

    logger.info('subset construction: %d nfa states -> %d dfa states',
                len(nfa), len(dfa))
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug('state mapping:\n%s', result.table())
    return result


def determinize(nfa: Automaton) -> Automaton:
    return subset_construction(nfa).dfa


def is_deterministic(automaton: Automaton) -> bool:
    return automaton.is_deterministic()


def main():
    logging.basicConfig(level=logging.DEBUG)
    nfa = Automaton()
    nfa.add_state('0', is_initial=True)
    nfa.add_state('B')
    nfa.add_state('C')
    nfa.add_state('1', is_terminal=True)
    nfa.add_transition('0', 'a', 'B')
    nfa.add_transition('0', 'a', 'C')
    nfa.add_transition('B', 'b', 'B')
    nfa.add_transition('C', 'c', 'C')
    nfa.add_transition('B', 'a', '1')
    nfa.add_transition('C', 'a', '1')
    print('nfa:')
    print(nfa)
    dfa = determinize(nfa)
    print('dfa:')
    print(dfa)
    g = dfa.visualize()
    g.view(cleanup=True)


if __name__ == '__main__':
    main()
