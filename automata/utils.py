from typing import Collection, FrozenSet, Iterable, List, NamedTuple
from typing_extensions import TypeAlias

# empty set
Oslash: str = 'Ø'

# markers used when printing transition tables
INITIAL_MARK: str = '->'
TERMINAL_MARK: str = '*'

# prefix of the states minted by subset construction
STATE_PREFIX: str = ''

State: TypeAlias = str

Input: TypeAlias = str

# a set of states treated as one unit (subset construction)
StateSet: TypeAlias = FrozenSet[State]


def state_name(state: State) -> str:
    return f'{state}'


def state_set_name(states: Iterable[State]) -> str:
    '''
    human readable form of a state set, members are sorted so that
    equal sets always print the same way
    '''
    return f'{{{",".join(map(state_name, sorted(states)))}}}'


class TransPair(NamedTuple):
    current: State
    input: Input


class NameAllocator:

    def __init__(self, prefix='') -> None:
        self._id = 0
        self._prefix = prefix
        self._names: List[str] = []

    @property
    def next(self) -> str:
        _id = f'{self._prefix}{self._id}'
        self._names.append(_id)
        self._id += 1
        return _id

    @property
    def names(self) -> List[str]:
        return self._names


def check_type(_obj: object, _type, field_name: str):
    assert isinstance(
        _obj, _type
    ), f'Field {field_name} must be type {_type}, requested {type(_obj)}.'


def check_array_type(_list: Collection,
                     element_type,
                     list_type,
                     field_name: str,
                     allow_empty=False):
    check_type(_list, list_type, field_name)
    if not allow_empty:
        assert len(_list) != 0, f'Field {field_name} must not be empty.'
    assert all(
        isinstance(element, element_type) for element in _list
    ), f'Field {field_name} must be type List[{element_type}], requested List[{[type(element) for element in _list]}].'


def check_symbol(symbol: object, field_name: str):
    check_type(symbol, Input, field_name)
    assert len(
        symbol) == 1, f'Field {field_name} must be a single symbol, requested {symbol!r}.'
