import io

from eraboard.cli import main, run


def session(text):
    out = io.StringIO()
    code = run(io.StringIO(text), out)
    return code, out.getvalue()


def test_quit_immediately():
    code, output = session("0\n")
    assert code == 0
    assert "Voce escolheu sair do menu" in output


def test_end_of_input_stops():
    code, output = session("")
    assert code == 0
    assert "Voce escolheu sair do menu" not in output


def test_invalid_option():
    _, output = session("42\nabc\n0\n")
    assert output.count("Opcao invalida. Por favor, escolha uma opcao valida.") == 2


def test_add_and_list_waiting():
    _, output = session("1\nAna Maria\n2\n2\n0\n")
    assert "Passageiro 'Ana Maria' adicionado a lista de espera." in output
    assert "2. Era dos Dinossauros - Limite de passageiros: 4" in output
    assert "Passageiro adicionado a era Era dos Dinossauros. Vagas restantes: 3" in output
    assert "Lista espera:\n1 - Ana Maria\n" in output


def test_invalid_era_falls_back():
    _, output = session("1\nAna\n9\n0\n")
    assert "Era invalida! Usando a primeira era disponivel por padrao." in output
    assert "Passageiro adicionado a era Idade Media. Vagas restantes: 3" in output


def test_full_era_drops_passenger():
    text = "".join(f"1\nP{i}\n1\n" for i in range(1, 6)) + "2\n0\n"
    _, output = session(text)
    assert "Passageiro 'P5' removido da lista de espera." in output
    assert "A era Idade Media esta lotada! Por favor, escolha outra era." in output
    assert "4 - P4" in output
    assert "5 - P5" not in output


def test_board_and_disembark_first():
    _, output = session("1\nAna\n1\n3\n6\n8\n0\n")
    assert "Passageiro 'Ana' embarcado do início da lista de espera." in output
    assert "Lista embarcados:\n1 - Ana\n" in output
    assert (
        "Passageiro 'Ana' chegou do inicio da lista de embarcados para a  Idade Media ."
        in output
    )


def test_board_specific_and_disembark():
    text = "1\nAna\n1\n1\nBia\n1\n5\n2\n7\n1\n9\n0\n"
    _, output = session(text)
    assert "Passageiro 'Bia' embarcado na posicao 2 da lista de espera." in output
    assert "Passageiro removido da lista de embarcados com sucesso!" in output
    assert "A lista de embarcados esta vazia! Ninguem para desembarcar." in output


def test_board_last():
    _, output = session("1\nAna\n1\n1\nBia\n1\n4\n6\n0\n")
    assert "Passageiro 'Bia' embarcado do final da lista de espera." in output
    assert "Lista embarcados:\n1 - Bia\n" in output


def test_empty_list_messages():
    _, output = session("3\n5\n1\n7\n1\n8\n0\n")
    assert "A lista de espera está vazia! Ninguém para embarcar." in output
    assert "A lista de espera esta vazia\n" in output
    assert "A lista de embarcados esta vazia.\n" in output
    assert "A lista de embarcados esta vazia!\n" in output


def test_invalid_index_messages():
    _, output = session("1\nAna\n1\n5\n3\n3\n7\n4\n0\n")
    assert output.count("indice invalido. Nenhum passageiro embarcado.") == 2


def test_loop_ends_when_all_eras_full():
    text = "".join(f"1\nP{i}\n{era}\n" for era in (1, 2, 3) for i in range(4))
    text += "0\n"
    _, output = session(text)
    assert output.count("Vagas restantes: 0") == 3
    assert "Voce escolheu sair do menu" not in output


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("0\n"))
    assert main([]) == 0
    assert "Voce escolheu sair do menu" in capsys.readouterr().out