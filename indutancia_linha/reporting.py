import numpy as np
import logging
import datetime
from typing import List

from indutancia_linha.constants import (CASAS_DECIMAIS_PADRAO, COEFICIENTE_INDUTANCIA_MH_KM,
                                        PERMEABILIDADE_MAGNETICA, PERMEABILIDADE_RELATIVA)
from indutancia_linha.data_models import ParametrosLinha, ResultadoCalculo

def formatar_matriz(matriz, precisao: int = CASAS_DECIMAIS_PADRAO) -> List[List[str]]:
    """Converte cada elemento da matriz em texto com precisão decimal fixa, sem alterar os valores."""
    return [[f"{val:.{precisao}f}" for val in linha] for linha in np.asarray(matriz, dtype=float)]

def gerar_memorial_calculo(parametros: ParametrosLinha, resultado: ResultadoCalculo,
                           precisao: int = CASAS_DECIMAIS_PADRAO) -> str:
    logging.info("Gerando memorial de cálculo da matriz de indutância.")

    def format_matriz(matriz, nome, unidades=None):
        titulo = f"--- {nome} ({unidades}) ---" if unidades else f"--- {nome} ---"
        linhas = [titulo]
        for i, linha in enumerate(formatar_matriz(matriz, precisao)):
            linhas.append(f"  Fase {i+1}: [ " + "  ".join(f"{val:>10}" for val in linha) + " ]")
        return "\n".join(linhas) + "\n"

    partes = []
    partes.append("="*80 + "\nMEMORIAL DE CÁLCULO DA MATRIZ DE INDUTÂNCIA - LINHA TRIFÁSICA AÉREA\n" + "="*80 + "\n")
    partes.append(f"Data da Geração: {datetime.datetime.now().strftime('%d/%m/%Y %H:%M:%S')}\n")
    partes.append("Método: coeficientes de Maxwell com condutores imagem (solo perfeitamente condutor)\n")
    partes.append(f"μ0 = {PERMEABILIDADE_MAGNETICA:.6e} H/m, μr = {PERMEABILIDADE_RELATIVA:g}, "
                  f"[L] = {COEFICIENTE_INDUTANCIA_MH_KM} × [P] mH/km\n\n")

    partes.append("-" * 25 + " DADOS DE ENTRADA DA LINHA " + "-" * 28 + "\n")
    partes.append(f"Altura dos Condutores (H): {parametros.altura_m} m\n")
    partes.append(f"Espaçamento entre Fases (S): {parametros.espacamento_fases_m} m\n")
    partes.append(f"Diâmetro do Subcondutor (d): {parametros.diametro_condutor_cm} cm\n")
    partes.append(f"Número de Subcondutores (N): {int(parametros.numero_subcondutores)}\n")
    if parametros.numero_subcondutores > 1:
        partes.append(f"Espaçamento do Feixe (B): {parametros.espacamento_feixe_cm} cm\n")
    partes.append("\n")

    partes.append("-" * 29 + " RESULTADOS PRINCIPAIS " + "-" * 28 + "\n")
    partes.append(f"Raio Equivalente (r_eq): {resultado.raio_equivalente_m * 100:.{precisao}f} cm\n")
    partes.append(f"Indutância Própria (L_s): {resultado.indutancia_propria:.{precisao}f} mH/km\n")
    partes.append(f"Indutância Mútua Média (L_m): {resultado.indutancia_mutua_media:.{precisao}f} mH/km\n\n")

    partes.append("-" * 34 + " MATRIZES " + "-" * 36 + "\n\n")
    partes.append(format_matriz(resultado.matriz_maxwell, "Matriz de Coeficientes de Maxwell [P]"))
    partes.append(format_matriz(resultado.indutancia_nao_transposta, "Matriz de Indutância Não Transposta [L]", "mH/km"))
    partes.append(format_matriz(resultado.indutancia_transposta, "Matriz de Indutância Transposta [L]", "mH/km"))

    partes.append("\n" + "-" * 29 + " PASSOS DO CÁLCULO " + "-" * 32 + "\n\n")
    for i, passo in enumerate(resultado.passos):
        partes.append(f"Passo {i+1}: {passo.rotulo}\n")
        partes.append(f"  Fórmula: {passo.formula}\n")
        partes.append(f"  Valor: {passo.valor}\n")
        partes.append(f"  {passo.explicacao}\n\n")

    partes.append("="*80 + "\nFIM DO MEMORIAL\n" + "="*80 + "\n")
    logging.info("Memorial de cálculo gerado com sucesso.")
    return "".join(partes)
