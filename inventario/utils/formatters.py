"""
Funciones de formateo para Inventario
"""
from datetime import datetime
from typing import Union


def formato_moneda(valor: Union[float, int], decimales: int = 2, simbolo: str = "USD") -> str:
    """
    Formatea un valor como moneda

    Args:
        valor: Valor numérico
        decimales: Cantidad de decimales
        simbolo: Símbolo de moneda

    Returns:
        String formateado como moneda
    """
    if valor is None:
        return f"{simbolo} 0.00"

    try:
        valor_formateado = f"{valor:,.{decimales}f}"
        # Cambiar separadores para formato español
        valor_formateado = valor_formateado.replace(",", "X").replace(".", ",").replace("X", ".")
        return f"{simbolo} {valor_formateado}"
    except (TypeError, ValueError):
        return f"{simbolo} {valor}"


def formato_numero(valor: Union[float, int], decimales: int = 0) -> str:
    """
    Formatea un número con separadores de miles
    """
    if valor is None:
        return "0"

    try:
        if decimales == 0:
            valor_formateado = f"{int(valor):,}"
        else:
            valor_formateado = f"{valor:,.{decimales}f}"
        valor_formateado = valor_formateado.replace(",", "X").replace(".", ",").replace("X", ".")
        return valor_formateado
    except (TypeError, ValueError):
        return str(valor)


def formato_confianza(valor: float) -> str:
    """Confianza (0-1) como porcentaje entero: 0.667 -> '67%'"""
    if valor is None:
        return "0%"
    return f"{valor * 100:.0f}%"


def formato_hora(instante: datetime) -> str:
    """Hora de la ultima actualizacion (HH:MM:SS)"""
    if instante is None:
        return "--:--:--"
    return instante.strftime("%H:%M:%S")
