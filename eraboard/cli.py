"""Interactive menu for the boarding desk."""

from __future__ import annotations

import re
import sys
from typing import TextIO

from eraboard.passengers import (
    BoardedList,
    EmptyListError,
    EraList,
    InvalidIndexError,
    WaitingList,
    format_listing,
)

DEFAULT_ERAS = ("Idade Media", "Era dos Dinossauros", "Ano 3000")

MENU = (
    "1. Adicionar passageiro a espera\n"
    "2. Listar passageiros em espera\n"
    "3. Embarcar primeiro passageiro da espera\n"
    "4. Embarcar ultimo passageiro da espera\n"
    "5. Embarcar passageiro especifico\n"
    "6. Listar passageiros embarcados\n"
    "7. Desembarcar passageiro especifico\n"
    "8. Desembarcar primeiro passageiro\n"
    "9. Desembarcar ultimo passageiro\n"
    "0. Sair\n"
    "\nEscolha uma opcao (0 a 9): "
)

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


class _EndOfInput(Exception):
    pass


def _parse_int(line: str) -> int | None:
    match = _INT_PREFIX.match(line)
    return int(match.group(1)) if match else None


class _Session:
    def __init__(self, stdin: TextIO, stdout: TextIO) -> None:
        self.stdin = stdin
        self.stdout = stdout
        self.eras = EraList(DEFAULT_ERAS)
        self.waiting = WaitingList()
        self.boarded = BoardedList()

    def say(self, text: str = "") -> None:
        self.stdout.write(text + "\n")

    def read_line(self) -> str:
        line = self.stdin.readline()
        if not line:
            raise _EndOfInput
        return line.rstrip("\n")

    def read_int(self) -> int:
        value = _parse_int(self.read_line())
        return 0 if value is None else value

    def read_name(self) -> str:
        while True:
            name = self.read_line().strip()
            if name:
                return name

    def show_listing(self, names) -> None:
        listing = format_listing(names)
        if listing:
            self.say(listing)
        self.say()

    def add_waiting(self) -> None:
        self.say("Voce escolheu Adicionar passageiro a espera, entao escreva o nome dele!")
        name = self.read_name()
        self.waiting.append(name)
        self.say(f"Passageiro '{name}' adicionado a lista de espera.")
        self.say("Agora, escolha qual sera o destino dele!")
        for line in self.eras.describe():
            self.say(line)
        self.stdout.write("Escolha a era (1 a 3): ")
        choice = self.read_int()
        if choice > len(self.eras):
            self.say("Era invalida! Usando a primeira era disponivel por padrao.")
        era, removed = self.eras.select(choice, self.waiting)
        if removed is None:
            self.say(
                f"Passageiro adicionado a era {era.name}. "
                f"Vagas restantes: {era.passenger_limit}"
            )
        else:
            self.say(f"Passageiro '{removed}' removido da lista de espera.")
            self.say(f"A era {era.name} esta lotada! Por favor, escolha outra era.")

    def list_waiting(self) -> None:
        self.say("Voce escolheu Listar passageiros em espera")
        self.say("Lista espera:")
        self.show_listing(self.waiting)

    def board_first(self) -> None:
        self.say("Voce escolheu Embarcar primeiro passageiro da espera")
        try:
            name = self.boarded.board_first(self.waiting)
        except EmptyListError:
            self.say("A lista de espera está vazia! Ninguém para embarcar.")
            return
        self.say(f"Passageiro '{name}' embarcado do início da lista de espera.")

    def board_last(self) -> None:
        self.say("Voce escolheu Embarcar ultimo passageiro da espera")
        try:
            name = self.boarded.board_last(self.waiting)
        except EmptyListError:
            return
        self.say(f"Passageiro '{name}' embarcado do final da lista de espera.")

    def board_at(self) -> None:
        self.say(
            "Voce escolheu Embarcar passageiro especifico em espera, "
            "insira o índice desejado (começa em 1)"
        )
        index = self.read_int()
        try:
            name = self.boarded.board_at(self.waiting, index)
        except EmptyListError:
            self.say("A lista de espera esta vazia")
            return
        except InvalidIndexError:
            self.say("indice invalido. Nenhum passageiro embarcado.")
            return
        self.say(f"Passageiro '{name}' embarcado na posicao {index} da lista de espera.")

    def list_boarded(self) -> None:
        self.say("Voce escolheu Listar passageiros embarcados")
        self.say("Lista embarcados:")
        self.show_listing(self.boarded)

    def disembark_at(self) -> None:
        self.say(
            "Voce escolheu Desembarcar passageiro especifico. "
            "Insira o índice desejado (começa em 1)"
        )
        index = self.read_int()
        try:
            self.boarded.disembark_at(index)
        except EmptyListError:
            self.say("A lista de embarcados esta vazia.")
            return
        except InvalidIndexError:
            self.say("indice invalido. Nenhum passageiro embarcado.")
            return
        self.say("Passageiro removido da lista de embarcados com sucesso!")

    def disembark_first(self) -> None:
        self.say("Voce escolheu Desembarcar primeiro passageiro")
        try:
            name = self.boarded.disembark_first()
        except EmptyListError:
            self.say("A lista de embarcados esta vazia!")
            return
        era = self.eras.first()
        self.say(
            f"Passageiro '{name}' chegou do inicio da lista de embarcados para a  {era.name} ."
        )

    def disembark_last(self) -> None:
        self.say("Voce escolheu Desembarcar ultimo passageiro")
        try:
            name = self.boarded.disembark_last()
        except EmptyListError:
            self.say("A lista de embarcados esta vazia! Ninguem para desembarcar.")
            return
        self.say(f"Passageiro '{name}' desembarcado do final da lista de embarcados.")

    def loop(self) -> None:
        actions = {
            1: self.add_waiting,
            2: self.list_waiting,
            3: self.board_first,
            4: self.board_last,
            5: self.board_at,
            6: self.list_boarded,
            7: self.disembark_at,
            8: self.disembark_first,
            9: self.disembark_last,
        }
        while True:
            self.stdout.write(MENU)
            choice = _parse_int(self.read_line())
            if choice == 0:
                self.say("Voce escolheu sair do menu")
                return
            action = actions.get(choice)
            if action is None:
                self.say("Opcao invalida. Por favor, escolha uma opcao valida.")
            else:
                action()
            if not self.eras.has_space():
                return


def run(stdin: TextIO, stdout: TextIO) -> int:
    """Run the menu until the user quits, input ends or every era is full."""
    try:
        _Session(stdin, stdout).loop()
    except _EndOfInput:
        pass
    return 0


def main(argv: list[str] | None = None) -> int:
    return run(sys.stdin, sys.stdout)


if __name__ == "__main__":
    raise SystemExit(main())