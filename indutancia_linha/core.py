import numbers
import numpy as np
import logging
from typing import List, Tuple

from indutancia_linha.constants import COEFICIENTE_INDUTANCIA_MH_KM, FATOR_GMR_CONDUTOR_SOLIDO
from indutancia_linha.data_models import Coordenadas, ParametrosLinha, PassoCalculo, ResultadoCalculo

class ErroDominioNumerico(ValueError):
    """Parâmetros fora da faixa física válida (logaritmo de argumento não positivo ou valor não finito)."""

def _validar_parametros(parametros: ParametrosLinha) -> None:
    campos = {
        'altura_m': parametros.altura_m,
        'espacamento_fases_m': parametros.espacamento_fases_m,
        'diametro_condutor_cm': parametros.diametro_condutor_cm,
        'espacamento_feixe_cm': parametros.espacamento_feixe_cm,
        'numero_subcondutores': parametros.numero_subcondutores,
    }
    for nome, valor in campos.items():
        if isinstance(valor, bool) or not isinstance(valor, numbers.Real):
            raise ErroDominioNumerico(f"O parâmetro '{nome}' deve ser numérico (recebido: {valor!r}).")
        if not np.isfinite(valor):
            raise ErroDominioNumerico(f"O parâmetro '{nome}' deve ser finito (recebido: {valor}).")

    n = parametros.numero_subcondutores
    if n != int(n) or n < 1:
        raise ErroDominioNumerico(f"O número de subcondutores deve ser um inteiro >= 1 (recebido: {n}).")
    if parametros.altura_m <= 0:
        raise ErroDominioNumerico(f"A altura dos condutores deve ser positiva (recebido: {parametros.altura_m} m).")
    if parametros.espacamento_fases_m <= 0:
        raise ErroDominioNumerico(f"O espaçamento entre fases deve ser positivo (recebido: {parametros.espacamento_fases_m} m).")
    if parametros.diametro_condutor_cm <= 0:
        raise ErroDominioNumerico(f"O diâmetro do condutor deve ser positivo (recebido: {parametros.diametro_condutor_cm} cm).")
    if parametros.espacamento_feixe_cm < 0:
        raise ErroDominioNumerico(f"O espaçamento do feixe não pode ser negativo (recebido: {parametros.espacamento_feixe_cm} cm).")

def calcular_raio_equivalente(diametro_condutor_cm: float, espacamento_feixe_cm: float,
                              numero_subcondutores: int) -> Tuple[float, PassoCalculo]:
    """
    Calcula o raio equivalente (GMR) da fase.

    Condutor único: r_eq = r·0.7788. Feixe de N subcondutores com espaçamento B:
    r_eq = (N·r·B^(N-1))^(1/N).
    """
    r = diametro_condutor_cm / 200
    b = espacamento_feixe_cm / 100
    n = int(numero_subcondutores)

    if n == 1 or b == 0:
        raio_eq = r * FATOR_GMR_CONDUTOR_SOLIDO
        passo = PassoCalculo(
            rotulo="Raio Equivalente (Condutor Único)",
            formula="r_eq = r × 0.7788",
            valor=f"{raio_eq * 100:.4f} cm = {raio_eq:.6f} m",
            explicacao="Para condutor único, GMR = r × e^(-1/4)",
        )
    else:
        # (N·r·B^(N-1))^(1/N) em escala logarítmica, sem estouro para N ou B grandes
        raio_eq = np.exp((np.log(n) + np.log(r) + (n - 1) * np.log(b)) / n)
        passo = PassoCalculo(
            rotulo="Raio Equivalente (Feixe)",
            formula="r_eq = (N × r × B^(N-1))^(1/N)",
            valor=f"{raio_eq * 100:.4f} cm = {raio_eq:.6f} m",
            explicacao=f"Feixe de {n} subcondutores com espaçamento B = {espacamento_feixe_cm:g} cm",
        )

    if not np.isfinite(raio_eq) or raio_eq <= 0:
        raise ErroDominioNumerico(f"Raio equivalente inválido: {raio_eq} m.")
    return float(raio_eq), passo

class LinhaTrifasica:
    """
    Linha trifásica com as fases 1, 2 e 3 em disposição horizontal à altura H,
    separadas de S, sobre um plano de terra perfeitamente condutor.

    Os coeficientes de Maxwell seguem o método das imagens:
    P_ij = ln(D'_ij / D_ij), onde D'_ij é a distância do condutor i à imagem do
    condutor j e D_ii é o raio equivalente.
    """
    def __init__(self, *, altura_m: float, espacamento_fases_m: float, raio_equivalente_m: float):
        if not altura_m > 0:
            raise ErroDominioNumerico(f"A altura dos condutores deve ser positiva (recebido: {altura_m} m).")
        if not espacamento_fases_m > 0:
            raise ErroDominioNumerico(f"O espaçamento entre fases deve ser positivo (recebido: {espacamento_fases_m} m).")
        if not raio_equivalente_m > 0:
            raise ErroDominioNumerico(f"O raio equivalente deve ser positivo (recebido: {raio_equivalente_m} m).")

        self.altura_m = altura_m
        self.espacamento_fases_m = espacamento_fases_m
        self.raio_equivalente_m = raio_equivalente_m
        self.fases = [Coordenadas(x=i * espacamento_fases_m, y=altura_m) for i in range(3)]
        logging.debug(f"Linha inicializada: H={altura_m}m, S={espacamento_fases_m}m, r_eq={raio_equivalente_m:.6f}m")

    def coordenadas_imagens(self) -> List[Coordenadas]:
        return [fase.imagem() for fase in self.fases]

    def _distancia_entre_fases(self, i: int, j: int) -> float:
        if i == j:
            return self.raio_equivalente_m
        return float(self.fases[i].distancia_ate(self.fases[j]))

    def distancia_ate_imagem(self, i: int, j: int) -> float:
        return float(self.fases[i].distancia_ate(self.fases[j].imagem()))

    def calcular_coeficiente_maxwell(self, i: int, j: int) -> float:
        dist = self._distancia_entre_fases(i, j)
        dist_imagem = self.distancia_ate_imagem(i, j)
        if not dist > 0 or not dist_imagem > 0:
            raise ErroDominioNumerico(
                f"Distância não positiva no coeficiente P_{i+1}{j+1} (D={dist} m, D'={dist_imagem} m).")
        coeficiente = np.log(dist_imagem / dist)
        if not np.isfinite(coeficiente):
            raise ErroDominioNumerico(f"Coeficiente P_{i+1}{j+1} não finito: {coeficiente}.")
        if i == j and coeficiente <= 0:
            raise ErroDominioNumerico(
                f"Raio equivalente ({dist:.6f} m) maior ou igual a 2H ({dist_imagem} m): P_{i+1}{j+1} seria não positivo.")
        return float(coeficiente)

    def calcular_matriz_maxwell(self) -> np.ndarray:
        p = np.zeros((3, 3))
        for i in range(3):
            for j in range(3):
                p[i, j] = self.calcular_coeficiente_maxwell(i, j)
        return p

def _passos_coeficientes_maxwell(linha: LinhaTrifasica, p: np.ndarray) -> List[PassoCalculo]:
    h, s, r_eq = linha.altura_m, linha.espacamento_fases_m, linha.raio_equivalente_m
    d_imagem_12 = linha.distancia_ate_imagem(0, 1)
    d_imagem_13 = linha.distancia_ate_imagem(0, 2)
    return [
        PassoCalculo(
            rotulo="Coeficiente de Maxwell Próprio (P₁₁ = P₂₂ = P₃₃)",
            formula="P_ii = ln(2H / r_eq)",
            valor=f"{p[0, 0]:.4f}",
            explicacao=f"ln(2 × {h:g} / {r_eq:.4f}) = ln({2 * h / r_eq:.4f})",
        ),
        PassoCalculo(
            rotulo="Coeficiente de Maxwell Mútuo (P₁₂ = P₂₃)",
            formula="P_12 = ln(√(4H² + S²) / S)",
            valor=f"{p[0, 1]:.4f}",
            explicacao=f"ln(√(4×{h:g}² + {s:g}²) / {s:g}) = ln({d_imagem_12:.4f} / {s:g}) = ln({d_imagem_12 / s:.4f})",
        ),
        PassoCalculo(
            rotulo="Coeficiente de Maxwell Mútuo (P₁₃)",
            formula="P_13 = ln(√(4H² + (2S)²) / 2S)",
            valor=f"{p[0, 2]:.4f}",
            explicacao=f"ln(√(4×{h:g}² + 4×{s:g}²) / 2×{s:g}) = ln({d_imagem_13:.4f} / {2 * s:g}) = ln({d_imagem_13 / (2 * s):.4f})",
        ),
    ]

def _passo_indutancia(rotulo: str, formula: str, coeficiente: float, indutancia: float) -> PassoCalculo:
    return PassoCalculo(
        rotulo=rotulo,
        formula=formula,
        valor=f"{indutancia:.4f} mH/km",
        explicacao=f"{COEFICIENTE_INDUTANCIA_MH_KM} × {coeficiente:.4f} = {indutancia:.4f} mH/km",
    )

def _somente_leitura(matriz: np.ndarray) -> np.ndarray:
    matriz.setflags(write=False)
    return matriz

def calcular_matriz_indutancia(parametros: ParametrosLinha) -> ResultadoCalculo:
    """
    Calcula as matrizes de indutância (mH/km) não transposta e idealmente transposta
    da linha, registrando cada grandeza intermediária como um passo do memorial.

    Levanta ErroDominioNumerico para parâmetros fora da faixa física; nunca retorna NaN ou infinito.
    """
    _validar_parametros(parametros)
    passos: List[PassoCalculo] = []

    # 1. Raio equivalente
    raio_eq, passo_raio = calcular_raio_equivalente(
        parametros.diametro_condutor_cm, parametros.espacamento_feixe_cm, parametros.numero_subcondutores)
    passos.append(passo_raio)

    # 2. Coeficientes de Maxwell
    linha = LinhaTrifasica(altura_m=parametros.altura_m, espacamento_fases_m=parametros.espacamento_fases_m,
                           raio_equivalente_m=raio_eq)
    p = linha.calcular_matriz_maxwell()
    p11, p12, p13 = p[0, 0], p[0, 1], p[0, 2]
    logging.debug(f"Coeficientes de Maxwell: P11={p11:.6f}, P12={p12:.6f}, P13={p13:.6f}")
    passos.extend(_passos_coeficientes_maxwell(linha, p))

    # 3. [L] = 0.2·[P] mH/km
    l_nao_transposta = p * COEFICIENTE_INDUTANCIA_MH_KM
    l_propria = p11 * COEFICIENTE_INDUTANCIA_MH_KM
    l_12 = p12 * COEFICIENTE_INDUTANCIA_MH_KM
    l_13 = p13 * COEFICIENTE_INDUTANCIA_MH_KM
    passos.append(_passo_indutancia("Indutância Própria (L_s)", "L_s = 0.2 × P_ii", p11, l_propria))
    passos.append(_passo_indutancia("Indutância Mútua (L₁₂ = L₂₃)", "L_12 = 0.2 × P_12", p12, l_12))
    passos.append(_passo_indutancia("Indutância Mútua (L₁₃)", "L_13 = 0.2 × P_13", p13, l_13))

    # 4. Transposição ideal: cada par de fases ocupa cada posição relativa em 1/3 do comprimento
    p_media = (2 * p12 + p13) / 3
    l_media = p_media * COEFICIENTE_INDUTANCIA_MH_KM
    passos.append(PassoCalculo(
        rotulo="Indutância Mútua Média (Transposta)",
        formula="L_m = 0.2 × (P₁₂ + P₂₃ + P₁₃) / 3",
        valor=f"{l_media:.4f} mH/km",
        explicacao=f"{COEFICIENTE_INDUTANCIA_MH_KM} × ({p12:.4f} + {p12:.4f} + {p13:.4f}) / 3",
    ))

    l_transposta = np.full((3, 3), l_media)
    np.fill_diagonal(l_transposta, l_propria)

    logging.info(f"Matriz de indutância calculada: H={parametros.altura_m}m, S={parametros.espacamento_fases_m}m, "
                 f"N={int(parametros.numero_subcondutores)}, r_eq={raio_eq:.6f}m, Ls={l_propria:.4f}mH/km, Lm={l_media:.4f}mH/km")

    return ResultadoCalculo(
        raio_equivalente_m=raio_eq,
        matriz_maxwell=_somente_leitura(p),
        indutancia_nao_transposta=_somente_leitura(l_nao_transposta),
        indutancia_transposta=_somente_leitura(l_transposta),
        indutancia_propria=float(l_propria),
        indutancia_mutua_adjacente=float(l_12),
        indutancia_mutua_externa=float(l_13),
        indutancia_mutua_media=float(l_media),
        passos=tuple(passos),
    )
