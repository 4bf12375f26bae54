# eraboard

A small interactive console program for the boarding desk of a time
machine. Passengers join a waiting list and pick a destination era; they
are then boarded from the waiting list and later disembark.

Three eras are available: *Idade Media*, *Era dos Dinossauros* and
*Ano 3000*. Each one has four seats. The menu and its messages are in
Portuguese.

## Installation

```
pip install .
```

## Running

```
eraboard
```

The menu offers:

```
1. Adicionar passageiro a espera
2. Listar passageiros em espera
3. Embarcar primeiro passageiro da espera
4. Embarcar ultimo passageiro da espera
5. Embarcar passageiro especifico
6. Listar passageiros embarcados
7. Desembarcar passageiro especifico
8. Desembarcar primeiro passageiro
9. Desembarcar ultimo passageiro
0. Sair
```

Option 1 asks for a name, adds it to the end of the waiting list and then
asks for an era (1 to 3). A number past the last era falls back to the
first one, as does a number below 1. Choosing an era takes one of its
seats; if the era has no seats left, the last passenger on the waiting
list is removed instead.

Options 5 and 7 ask for a position, counted from 1.

The program stops when you choose `0`, when its input ends, or as soon as
every era has run out of seats.

## Using the library

The list types live in `eraboard.passengers`:

```python
from eraboard.passengers import BoardedList, EraList, WaitingList, format_listing

eras = EraList()
eras.add("Ano 3000")              # an Era with passenger_limit 4

waiting = WaitingList()
waiting.append("Ana")
era, dropped = eras.select(1, waiting)
# era.passenger_limit is now 3, dropped is None

boarded = BoardedList()
boarded.board_first(waiting)      # moves "Ana" from waiting to boarded
print(format_listing(boarded))    # 1 - Ana
```

- `WaitingList` has `append`, `pop_first`, `pop_last` and `pop_at`.
- `BoardedList` has `board_first`, `board_last` and `board_at` (each
  taking from a `WaitingList`), and `disembark_first`, `disembark_last`
  and `disembark_at`.
- `EraList` has `add`, `select`, `first`, `has_space` and `describe`.
- All three can be iterated and support `len()`.

Operations on an empty list raise `EmptyListError`. A position outside
the list (positions start at 1) raises `InvalidIndexError`, a subclass of
`IndexError`.

The interactive loop can also be driven from code with
`eraboard.cli.run(stdin, stdout)`, which takes any text streams.

## Limitations

Everything is kept in memory: passengers and seat counts are lost when
the program ends. The set of eras and their seat limits are fixed in the
menu program and cannot be changed from the command line. The screen is
not cleared between menu choices.

## Tests

```
pip install .[test]
pytest
```