from dataclasses import dataclass


@dataclass(frozen=True)
class Principal:
    """Usuario autenticado que ejecuta la operación (sale de la sesión)."""

    user_id: int
    role: str
