import pytest
from pydantic import ValidationError

from indutancia_linha import main as entrada
from indutancia_linha.data_models import ParametrosLinha
from indutancia_linha.main import ParametrosLinhaEntrada, arredondar_numero_subcondutores, obter_input


def _respostas(monkeypatch, respostas):
    iterador = iter(respostas)
    monkeypatch.setattr("builtins.input", lambda prompt="": next(iterador))


def test_entrada_converte_para_parametros():
    entrada_linha = ParametrosLinhaEntrada(altura_m=15, espacamento_fases_m=11, diametro_condutor_cm=3.18,
                                           espacamento_feixe_cm=45.72, numero_subcondutores=2)
    assert entrada_linha.para_parametros() == ParametrosLinha(15.0, 11.0, 3.18, 45.72, 2)


@pytest.mark.parametrize("bruto, esperado", [(2, 2), (2.4, 2), (2.5, 3), (0, 1), (-3, 1), ("4", 4)])
def test_entrada_arredonda_numero_de_subcondutores(bruto, esperado):
    entrada_linha = ParametrosLinhaEntrada(altura_m=15, espacamento_fases_m=11, diametro_condutor_cm=3.18,
                                           numero_subcondutores=bruto)
    assert entrada_linha.numero_subcondutores == esperado


@pytest.mark.parametrize("alteracao", [
    {"altura_m": 0},
    {"espacamento_fases_m": -1},
    {"diametro_condutor_cm": float("inf")},
    {"altura_m": float("nan")},
    {"espacamento_feixe_cm": -0.1},
    {"numero_subcondutores": float("nan")},
    {"numero_subcondutores": "abc"},
])
def test_entrada_rejeita_valores_invalidos(alteracao):
    dados = dict(altura_m=15, espacamento_fases_m=11, diametro_condutor_cm=3.18,
                 espacamento_feixe_cm=45.72, numero_subcondutores=2)
    dados.update(alteracao)
    with pytest.raises(ValidationError):
        ParametrosLinhaEntrada(**dados)


def test_obter_input_usa_padrao_quando_vazio_ou_invalido(monkeypatch, capsys):
    _respostas(monkeypatch, ["", "abc", "7.5"])

    assert obter_input("Altura", 15.0) == 15.0
    assert obter_input("Altura", 15.0) == 15.0
    assert "Entrada inválida" in capsys.readouterr().out
    assert obter_input("Altura", 15.0) == 7.5


def test_main_com_valores_padrao_imprime_memorial(monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", lambda prompt="": "")

    assert entrada.main() == 0
    saida = capsys.readouterr().out
    assert "MEMORIAL DE CÁLCULO DA MATRIZ DE INDUTÂNCIA" in saida
    assert "Indutância Própria (L_s): 1.103" in saida
    assert "Raio Equivalente (Feixe)" in saida


def test_main_condutor_unico_nao_pergunta_espacamento_do_feixe(monkeypatch, capsys):
    perguntas = []

    def responder(prompt=""):
        perguntas.append(prompt)
        return {0: "12", 1: "4", 2: "2", 3: "1"}[len(perguntas) - 1]

    monkeypatch.setattr("builtins.input", responder)

    assert entrada.main() == 0
    assert len(perguntas) == 4
    assert "Raio Equivalente (Condutor Único)" in capsys.readouterr().out


def test_main_arredonda_subcondutores_antes_de_perguntar_espacamento(monkeypatch, capsys):
    perguntas = []

    def responder(prompt=""):
        perguntas.append(prompt)
        return ["12", "4", "2", "1.4"][len(perguntas) - 1]

    monkeypatch.setattr("builtins.input", responder)

    assert entrada.main() == 0
    assert len(perguntas) == 4
    assert "Número de Subcondutores (N): 1" in capsys.readouterr().out


@pytest.mark.parametrize("bruto, esperado", [(1.4, 1), (1.5, 2), ("3", 3), (-2, 1)])
def test_arredondar_numero_subcondutores(bruto, esperado):
    assert arredondar_numero_subcondutores(bruto) == esperado


def test_main_com_altura_fora_da_faixa_numerica_retorna_erro(monkeypatch, capsys):
    _respostas(monkeypatch, ["1e308", "11", "3.18", "2", "45.72"])

    assert entrada.main() == 1
    assert "MEMORIAL" not in capsys.readouterr().out


def test_main_com_numero_de_subcondutores_nao_finito_retorna_erro(monkeypatch):
    _respostas(monkeypatch, ["15", "11", "3.18", "nan"])

    assert entrada.main() == 1


def test_main_com_parametro_invalido_retorna_erro(monkeypatch, capsys):
    _respostas(monkeypatch, ["0", "11", "3.18", "2", "45.72"])

    assert entrada.main() == 1
    assert "MEMORIAL" not in capsys.readouterr().out
