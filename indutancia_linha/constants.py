import numpy as np
from typing import Final, Dict

# --- Constantes de Base ---
PERMEABILIDADE_MAGNETICA: Final[float] = 4 * np.pi * 1e-7
PERMEABILIDADE_RELATIVA: Final[float] = 1.0  # condutores não magnéticos

# μ0·μr / 2π expresso em mH/km
COEFICIENTE_INDUTANCIA_MH_KM: Final[float] = 0.2

# GMR de condutor sólido: r' = r·e^(-1/4)
FATOR_GMR_CONDUTOR_SOLIDO: Final[float] = 0.7788

CASAS_DECIMAIS_PADRAO: Final[int] = 4

# Linha de referência (feixe duplo, 15 m de altura)
PARAMETROS_PADRAO: Final[Dict[str, float]] = {
    "altura_m": 15.0,
    "espacamento_fases_m": 11.0,
    "diametro_condutor_cm": 3.18,
    "espacamento_feixe_cm": 45.72,
    "numero_subcondutores": 2,
}
