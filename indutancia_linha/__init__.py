from indutancia_linha.core import ErroDominioNumerico, LinhaTrifasica, calcular_matriz_indutancia
from indutancia_linha.data_models import ParametrosLinha, PassoCalculo, ResultadoCalculo
from indutancia_linha.reporting import formatar_matriz, gerar_memorial_calculo
