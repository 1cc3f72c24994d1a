"""
Formateo y lectura de números con separador decimal configurable.

El formateo es una transformación de presentación: no altera la precisión
con la que se guardan los valores internamente.
"""

import math
from decimal import ROUND_HALF_EVEN, Decimal

DEFAULT_SEPARATOR = ","
DEFAULT_FRACTION_DIGITS = 10

# A partir de aquí un float no tiene dígitos decimales fiables
LARGE_MAGNITUDE = 1e15


def _shortest_fixed(value, max_fraction_digits):
    """
    Notación fija con los dígitos más cortos que identifican al float.

    3.7037036703703704e19 → "37037036703703704000" en lugar de
    "37037036703703703552" (ruido binario de la conversión exacta).
    """
    number = Decimal(repr(value))
    if number.as_tuple().exponent < -max_fraction_digits:
        number = number.quantize(Decimal(1).scaleb(-max_fraction_digits),
                                 rounding=ROUND_HALF_EVEN)
    return format(number, "f")


def format_number(value, decimal_separator=DEFAULT_SEPARATOR,
                  max_fraction_digits=DEFAULT_FRACTION_DIGITS):
    """
    Convierte un número a texto con el mínimo de dígitos necesarios.

    Args:
        value (float): Número a formatear
        decimal_separator (str): Glifo del separador decimal (por defecto ",")
        max_fraction_digits (int): Máximo de decimales mostrados

    Returns:
        str: Texto para el display

    Ejemplos:
        - 8.0 → "8"
        - 2.5 → "2,5"
        - 0.1 + 0.2 → "0,3" (redondeo a 10 decimales)
        - -0.0 → "0"
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "∞" if value > 0 else "-∞"

    if abs(value) >= LARGE_MAGNITUDE:
        text = _shortest_fixed(value, max_fraction_digits)
    else:
        text = f"{value:.{max_fraction_digits}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    # Un valor que redondea a cero pierde el signo
    if text == "-0":
        text = "0"
    return text.replace(".", decimal_separator)


def parse_number(text, decimal_separator=DEFAULT_SEPARATOR):
    """
    Interpreta el buffer de dígitos del usuario como número.

    Args:
        text (str): Buffer con dígitos y, como mucho, un separador decimal
        decimal_separator (str): Glifo del separador decimal

    Returns:
        float | None: Valor leído, o None si el texto no es un número finito
    """
    if not text:
        return None
    try:
        value = float(text.replace(decimal_separator, "."))
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value
