from dataclasses import dataclass
from typing import Tuple
import numpy as np

@dataclass(frozen=True)
class Coordenadas:
    """Representa um ponto imutável no plano transversal da linha (x, y), com y = 0 no solo."""
    x: float
    y: float
    def distancia_ate(self, outro: 'Coordenadas') -> float:
        return np.hypot(self.x - outro.x, self.y - outro.y)

    def imagem(self) -> 'Coordenadas':
        """Condutor imagem, espelhado em relação ao plano de terra."""
        return Coordenadas(self.x, -self.y)

@dataclass(frozen=True)
class ParametrosLinha:
    """Dados geométricos de uma linha trifásica horizontal com feixe de subcondutores."""
    altura_m: float
    espacamento_fases_m: float
    diametro_condutor_cm: float
    espacamento_feixe_cm: float
    numero_subcondutores: int

@dataclass(frozen=True)
class PassoCalculo:
    """Um passo do memorial: rótulo, fórmula, valor calculado e explicação."""
    rotulo: str
    formula: str
    valor: str
    explicacao: str

@dataclass(frozen=True)
class ResultadoCalculo:
    """Resultado completo do cálculo. Matrizes 3x3 somente leitura, indutâncias em mH/km."""
    raio_equivalente_m: float
    matriz_maxwell: np.ndarray
    indutancia_nao_transposta: np.ndarray
    indutancia_transposta: np.ndarray
    indutancia_propria: float
    indutancia_mutua_adjacente: float
    indutancia_mutua_externa: float
    indutancia_mutua_media: float
    passos: Tuple[PassoCalculo, ...]
