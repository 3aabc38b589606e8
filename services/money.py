from decimal import Decimal, InvalidOperation

CENTS = Decimal("0.01")
# Numeric(14, 2): hasta 12 dígitos enteros
MAX_AMOUNT = Decimal("999999999999.99")


def to_amount(val) -> Decimal:
    """
    Convierte un valor del formulario/JSON a Decimal(14,2).
    Acepta int, float o string con coma o punto decimal.
    Lanza ValueError si no es un número finito o no cabe en la columna.
    """
    if val is None or isinstance(val, bool):
        raise ValueError("valor vacío o inválido")
    s = str(val).strip().replace(",", ".")
    try:
        d = Decimal(s)
    except (InvalidOperation, ValueError):
        raise ValueError(f"no es un número: {val!r}")
    if not d.is_finite():
        raise ValueError(f"no es un número finito: {val!r}")
    if abs(d) > MAX_AMOUNT:
        raise ValueError(f"monto fuera de rango: {val!r}")
    try:
        return d.quantize(CENTS)
    except InvalidOperation:
        raise ValueError(f"monto fuera de rango: {val!r}")


def format_amount(val) -> str:
    """Formato de pesos sin decimales y con punto de miles: -5000 -> '-5.000'."""
    d = Decimal(str(val or 0))
    return f"{d:,.0f}".replace(",", ".")
