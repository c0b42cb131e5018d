from typing import Any, Dict, FrozenSet, Iterable, List, Set, Union, cast
from graphviz import Digraph

from prettytable import PrettyTable

if __name__ == '__main__':
    import os
    import sys
    SCRIPT_DIR = os.path.dirname(os.path.abspath(__file__))
    sys.path.append(os.path.dirname(SCRIPT_DIR))

from automata.utils import (INITIAL_MARK, TERMINAL_MARK, Oslash, check_type,
                            check_array_type, check_symbol, State, Input,
                            TransPair, state_name)


class Transition:
    # a single labelled edge, compared by value so a set of them collapses duplicates
    def __init__(self, current: State, input: Input, target: State) -> None:
        check_type(current, State, 'Transition.current')
        check_type(target, State, 'Transition.target')
        check_symbol(input, 'Transition.input')
        self._current = current
        self._input = input
        self._target = target

    @property
    def current(self) -> State:
        return self._current

    @property
    def input(self) -> Input:
        return self._input

    @property
    def target(self) -> State:
        return self._target

    def _key(self):
        return (self.current, self.input, self.target)

    def __repr__(self) -> str:
        return f'{self.current}->{self.target} on {self.input}'

    def __eq__(self, __o: object) -> bool:
        if not isinstance(__o, Transition):
            return False
        return self._key() == __o._key()

    def __lt__(self, __o: 'Transition') -> bool:
        return self._key() < __o._key()

    def __hash__(self) -> int:
        return hash(self._key())

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> 'Transition':
        current = cast(State, data.get('current'))
        input = cast(Input, data.get('input'))
        target = cast(State, data.get('target'))
        return Transition(current, input, target)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'type': 'Transition',
            'current': self.current,
            'input': self.input,
            'target': self.target
        }


class Automaton:
    # an automaton has 4 attributes
    # a state set
    # an initial states set (one or more)
    # a terminal states set
    # a transition set, from which the alphabet is derived
    #
    # nothing is ever removed, states and transitions only accumulate
    def __init__(self) -> None:
        self._states: Set[State] = set()
        self._initial_states: Set[State] = set()
        self._terminal_states: Set[State] = set()
        self._transitions: Set[Transition] = set()
        self._trans_table: Dict[TransPair, Set[State]] = {}

    def add_state(self,
                  label: State,
                  is_initial: bool = False,
                  is_terminal: bool = False) -> None:
        '''
        register a state, flags can be added by a later call but never cleared
        '''
        check_type(label, State, 'label')
        self._states.add(label)
        if is_initial:
            self._initial_states.add(label)
        if is_terminal:
            self._terminal_states.add(label)

    def add_transition(self, source: State, symbol: Input,
                       dest: State) -> None:
        '''
        add `source -symbol-> dest`, the endpoints are not required to be
        registered states
        '''
        trans = Transition(source, symbol, dest)
        if trans in self._transitions:
            return
        self._transitions.add(trans)
        trans_pair = TransPair(source, symbol)
        if self._trans_table.get(trans_pair) is None:
            self._trans_table[trans_pair] = set()
        self._trans_table[trans_pair].add(dest)

    def transitions_from(self, source: State, symbol: Input) -> Set[State]:
        '''
        every destination reachable from `source` on `symbol`, empty if none
        '''
        return set(self._trans_table.get(TransPair(source, symbol), set()))

    @property
    def states(self) -> List[State]:
        return sorted(self._states)

    @property
    def transitions(self) -> List[Transition]:
        return sorted(self._transitions)

    @property
    def initial_states(self) -> FrozenSet[State]:
        return frozenset(self._initial_states)

    @property
    def terminal_states(self) -> FrozenSet[State]:
        return frozenset(self._terminal_states)

    @property
    def alphabet(self) -> List[Input]:
        # symbols are only known through the transitions using them
        return sorted(set(trans.input for trans in self._transitions))

    def is_deterministic(self) -> bool:
        if len(self._initial_states) > 1:
            return False
        return all(len(targets) <= 1 for targets in self._trans_table.values())

    def accepts(self, word: Iterable[Input]) -> bool:
        from automata.acceptance import accepts
        return accepts(self, word)

    def determinize(self) -> 'Automaton':
        from automata.dfa_utils import determinize
        return determinize(self)

    def __len__(self) -> int:
        return len(self._states)

    def __contains__(self, state: object) -> bool:
        return state in self._states

    def __eq__(self, __o: object) -> bool:
        if not isinstance(__o, Automaton):
            return False
        return self._states == __o._states \
            and self._initial_states == __o._initial_states \
            and self._terminal_states == __o._terminal_states \
            and self._transitions == __o._transitions

    __hash__ = None  # type: ignore

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> Union['Automaton', Transition]:
        # using data['type'] to distinguish transition object or automaton object
        type_name = cast(str, data.get('type'))
        if type_name == 'Transition':
            return Transition.from_dict(data)
        elif type_name != 'Automaton':
            raise ValueError(
                f'type field of object must be `Transition` or `Automaton`, requested: {type_name}'
            )
        states = cast(List[State], data.get('states', []))
        initial_states = cast(List[State], data.get('initial_states', []))
        terminal_states = cast(List[State], data.get('terminal_states', []))
        transitions = cast(List[Union[Transition, Dict[str, Any]]],
                           data.get('transitions', []))
        check_array_type(states, State, list, 'states', True)
        check_array_type(initial_states, State, list, 'initial_states', True)
        check_array_type(terminal_states, State, list, 'terminal_states',
                         True)
        automaton = Automaton()
        for s in states:
            automaton.add_state(s, s in initial_states, s in terminal_states)
        # flags on states missing from `states` still register them
        for s in initial_states:
            automaton.add_state(s, is_initial=True)
        for s in terminal_states:
            automaton.add_state(s, is_terminal=True)
        for trans in transitions:
            if isinstance(trans, dict):
                trans = Transition.from_dict(trans)
            check_type(trans, Transition, 'transitions')
            automaton.add_transition(trans.current, trans.input, trans.target)
        return automaton

    def to_dict(self) -> Dict[str, Any]:
        return {
            'type': 'Automaton',
            'states': self.states,
            'initial_states': sorted(self.initial_states),
            'terminal_states': sorted(self.terminal_states),
            'transitions': [trans.to_dict() for trans in self.transitions]
        }

    def __repr__(self) -> str:
        inputs = self.alphabet
        table = PrettyTable(['STATE', *inputs])
        # right alignment
        table.align['STATE'] = 'r'

        def format_state(s: State) -> str:
            res = f'{s}'
            if s in self._initial_states:
                res = f'{INITIAL_MARK} {res}'
            if s in self._terminal_states:
                res = f'{TERMINAL_MARK} {res}'
            return res

        for s in self.states:
            row: List[str] = [format_state(s)]
            for i in inputs:
                targets = self.transitions_from(s, i)
                row.append(Oslash if len(targets) ==
                           0 else ','.join(map(state_name, sorted(targets))))
            table.add_row(row)
        return table.get_string()

    def visualize(self) -> Digraph:
        '''
        visualize transition graph
        '''
        g = Digraph(name='automaton', graph_attr={'rankdir': 'LR'})

        g.node(name='vnode', label='', shape='none')

        for state in self.states:
            name = state_name(state)
            if state in self._terminal_states:
                g.node(name=name, label=name, shape='doublecircle')
            else:
                g.node(name=name, label=name, shape='circle')

        for state in sorted(self._initial_states):
            g.edge('vnode',
                   state_name(state),
                   label='start',
                   arrowsize='0.5')

        for trans in self.transitions:
            g.edge(state_name(trans.current),
                   state_name(trans.target),
                   trans.input,
                   arrowsize='0.5')
        return g


def main():
    automaton = Automaton()
    automaton.add_state('0', is_initial=True)
    automaton.add_state('1', is_terminal=True)
    automaton.add_transition('0', 'a', '0')
    automaton.add_transition('0', 'b', '1')
    print('*' * 40)
    print('automaton:')
    print(automaton)
    for word in ['aaa', 'aaaab', 'abbaaa', 'ba', 'aaaaaaaaaab']:
        print(f'{word}: {automaton.accepts(word)}')


if __name__ == '__main__':
    main()
