import pytest

from automata.acceptance import Verdict, accepts, simulate, step
from automata.automaton import Automaton


@pytest.fixture
def ends_with_b() -> Automaton:
    a = Automaton()
    a.add_state('0', is_initial=True)
    a.add_state('1', is_terminal=True)
    a.add_transition('0', 'a', '0')
    a.add_transition('0', 'b', '1')
    return a


@pytest.fixture
def branching() -> Automaton:
    a = Automaton()
    a.add_state('0', is_initial=True)
    a.add_state('B')
    a.add_state('C')
    a.add_state('1', is_terminal=True)
    a.add_transition('0', 'a', 'B')
    a.add_transition('0', 'a', 'C')
    a.add_transition('B', 'b', 'B')
    a.add_transition('C', 'c', 'C')
    a.add_transition('B', 'a', '1')
    a.add_transition('C', 'a', '1')
    return a


@pytest.mark.parametrize('word,expected', [
    ('aaa', False),
    ('aaab', True),
    ('aaaab', True),
    ('ba', False),
    ('abbaaa', False),
    ('b', True),
])
def test_ends_with_b(ends_with_b: Automaton, word: str, expected: bool):
    assert accepts(ends_with_b, word) is expected
    assert ends_with_b.accepts(word) is expected


@pytest.mark.parametrize('word,expected', [
    ('aa', True),
    ('abba', True),
    ('acca', True),
    ('abca', False),
    ('a', False),
    ('aaa', False),
])
def test_every_branch_is_followed(branching: Automaton, word: str,
                                  expected: bool):
    assert accepts(branching, word) is expected


def test_step_drops_states_without_transition(branching: Automaton):
    assert step(branching, {'B', 'C'}, 'b') == {'B'}
    assert step(branching, {'B', 'C'}, 'a') == {'1'}
    assert step(branching, {'1'}, 'a') == frozenset()


def test_run_records_live_sets(branching: Automaton):
    run = simulate(branching, 'aa')
    assert run.steps == [{'0'}, {'B', 'C'}, {'1'}]
    assert run.verdict is Verdict.ACCEPTED
    assert run.accepted
    assert run.final_states == {'1'}


def test_rejection_is_a_result_not_an_error(ends_with_b: Automaton):
    run = simulate(ends_with_b, 'ba')
    assert run.verdict is Verdict.REJECTED
    assert not run.verdict
    assert not run.accepted


def test_dead_run_stops_early(ends_with_b: Automaton):
    run = simulate(ends_with_b, 'bab')
    # {0} -b-> {1} -a-> {}
    assert run.steps == [{'0'}, {'1'}, frozenset()]
    assert run.final_states == frozenset()
    assert not run.accepted


def test_unknown_symbol_rejects(ends_with_b: Automaton):
    assert not accepts(ends_with_b, 'axb')


@pytest.mark.parametrize('initial_is_terminal', [True, False])
def test_empty_word(initial_is_terminal: bool):
    a = Automaton()
    a.add_state('0', is_initial=True, is_terminal=initial_is_terminal)
    a.add_state('1', is_terminal=True)
    a.add_transition('0', 'a', '1')
    assert accepts(a, '') is initial_is_terminal


def test_no_initial_state_rejects_everything():
    a = Automaton()
    a.add_state('1', is_terminal=True)
    a.add_transition('1', 'a', '1')
    assert not accepts(a, '')
    assert not accepts(a, 'aa')


def test_word_may_be_any_symbol_iterable(ends_with_b: Automaton):
    assert accepts(ends_with_b, ['a', 'a', 'b'])
    assert simulate(ends_with_b, ['a', 'b']).word == 'ab'
