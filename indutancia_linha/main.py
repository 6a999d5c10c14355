"""
Cálculo da matriz de indutância de uma linha de transmissão trifásica aérea
pelo método dos coeficientes de Maxwell (condutores imagem).

Uso:
    indutancia-linha
    python -m indutancia_linha.main

Os dados da linha são solicitados no terminal; pressione Enter para manter o
valor padrão. O memorial de cálculo é impresso na saída padrão.
"""
import sys
import logging
import numpy as np
from pydantic import BaseModel, ConfigDict, Field, field_validator

from indutancia_linha.constants import PARAMETROS_PADRAO
from indutancia_linha.core import calcular_matriz_indutancia
from indutancia_linha.data_models import ParametrosLinha
from indutancia_linha.reporting import gerar_memorial_calculo

def arredondar_numero_subcondutores(valor) -> int:
    """Arredonda para o inteiro mais próximo (meio para cima), com mínimo de 1 subcondutor."""
    try:
        valor = float(valor)
    except (TypeError, ValueError) as e:
        raise ValueError(f"Número de subcondutores inválido: {valor!r}") from e
    if not np.isfinite(valor):
        raise ValueError(f"Número de subcondutores deve ser finito: {valor}")
    return max(1, int(np.floor(valor + 0.5)))

class ParametrosLinhaEntrada(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    altura_m: float = Field(gt=0)
    espacamento_fases_m: float = Field(gt=0)
    diametro_condutor_cm: float = Field(gt=0)
    espacamento_feixe_cm: float = Field(default=0.0, ge=0)
    numero_subcondutores: int = 1

    @field_validator('numero_subcondutores', mode='before')
    @classmethod
    def arredondar_subcondutores(cls, valor):
        return arredondar_numero_subcondutores(valor)

    def para_parametros(self) -> ParametrosLinha:
        return ParametrosLinha(
            altura_m=self.altura_m,
            espacamento_fases_m=self.espacamento_fases_m,
            diametro_condutor_cm=self.diametro_condutor_cm,
            espacamento_feixe_cm=self.espacamento_feixe_cm,
            numero_subcondutores=self.numero_subcondutores,
        )

def obter_input(prompt, padrao, tipo=float):
    try:
        valor = input(f"{prompt} (padrão: {padrao}): ")
        return tipo(valor) if valor else padrao
    except ValueError:
        print("Entrada inválida. Usando valor padrão.")
        return padrao

PERGUNTAS = {
    'altura_m': "Altura dos condutores acima do solo, H (m)",
    'espacamento_fases_m': "Espaçamento entre fases adjacentes, S (m)",
    'diametro_condutor_cm': "Diâmetro do subcondutor, d (cm)",
    'numero_subcondutores': "Número de subcondutores por fase, N",
    'espacamento_feixe_cm': "Espaçamento entre subcondutores do feixe, B (cm)",
}

def main() -> int:
    """Coleta os dados da linha, executa o cálculo e imprime o memorial."""
    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
    print("--- Matriz de Indutância - Linha Trifásica Aérea ---")
    print("Por favor, insira os dados da linha. Pressione Enter para usar os valores padrão.")

    try:
        dados = {}
        for campo, prompt in PERGUNTAS.items():
            if campo == 'espacamento_feixe_cm' and arredondar_numero_subcondutores(dados['numero_subcondutores']) == 1:
                dados[campo] = 0.0
                continue
            dados[campo] = obter_input(prompt, PARAMETROS_PADRAO[campo])

        parametros = ParametrosLinhaEntrada(**dados).para_parametros()
        resultado = calcular_matriz_indutancia(parametros)
        print(gerar_memorial_calculo(parametros, resultado))
    except (ValueError, TypeError) as e:
        logging.error(f"Ocorreu um erro durante a execução: {e}", exc_info=True)
        return 1

    logging.info("--- Fim da Execução ---")
    return 0

if __name__ == "__main__":
    sys.exit(main())
