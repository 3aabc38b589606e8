"""
Garantiza que check_ins.status pueda guardar un valor de estado nuevo
(p. ej. "Discrepancia") en bases instaladas con un ENUM o VARCHAR corto.

- ENUM sin el valor      -> se agrega al final, conservando los existentes.
- VARCHAR/CHAR corto     -> VARCHAR(len(valor)) (mínimo 12).
- CHAR de cualquier largo -> VARCHAR (mismo largo o el mínimo).
- Text / String sin largo -> no se toca.
- Tipo desconocido        -> VARCHAR(32).

Se conserva nullability y server default. Es idempotente: si la columna ya
sirve no ejecuta nada. Si el ALTER falla se registra y se sigue, igual que
cuando no se puede inspeccionar. Lo usa la migración b2statuswide02 y, si
ENSURE_STATUS_COLUMN_ON_SUBMIT está activo, el registro de conteos.
"""

import sqlalchemy as sa
from alembic.migration import MigrationContext
from alembic.operations import Operations
from flask import current_app
from sqlalchemy import inspect
from sqlalchemy.exc import SQLAlchemyError

from models.check_in import CheckInStatus

MIN_STATUS_LENGTH = 12
FALLBACK_STATUS_LENGTH = 32


def plan_status_column_type(current_type, value: str):
    """Devuelve el tipo nuevo para la columna, o None si ya soporta `value`."""
    required = max(MIN_STATUS_LENGTH, len(value))

    if isinstance(current_type, sa.Enum):
        values = list(current_type.enums)
        if value in values:
            return None
        values.append(value)
        return sa.Enum(*values, name=current_type.name)

    if isinstance(current_type, sa.CHAR):
        length = current_type.length or 0
        return sa.String(length=max(required, length))

    if isinstance(current_type, sa.Text):
        return None

    if isinstance(current_type, sa.String):
        if current_type.length is None or current_type.length >= required:
            return None
        return sa.String(length=required)

    return sa.String(length=FALLBACK_STATUS_LENGTH)


def ensure_check_in_status_supports(bind, value: str = CheckInStatus.DISCREPANCIA) -> bool:
    """Amplía check_ins.status si hace falta. Devuelve True si hizo ALTER."""
    try:
        columns = inspect(bind).get_columns("check_ins")
    except SQLAlchemyError:
        current_app.logger.warning("No se pudo inspeccionar la columna check_ins.status", exc_info=True)
        return False

    column = next((c for c in columns if c["name"] == "status"), None)
    if column is None:
        current_app.logger.warning("No se encontró la definición de la columna check_ins.status")
        return False

    new_type = plan_status_column_type(column["type"], value)
    if new_type is None:
        return False

    default = column.get("default")
    server_default = sa.text(default) if default is not None else None

    # batch: en SQLite recrea la tabla; en MySQL/PostgreSQL es un ALTER normal
    ops = Operations(MigrationContext.configure(bind))
    try:
        with ops.batch_alter_table("check_ins") as batch_op:
            batch_op.alter_column(
                "status",
                type_=new_type,
                existing_type=column["type"],
                existing_nullable=column["nullable"],
                existing_server_default=server_default,
            )
    except SQLAlchemyError:
        current_app.logger.exception(
            "No se pudo ampliar check_ins.status de %s a %s", column["type"], new_type
        )
        return False

    current_app.logger.info(
        "Columna check_ins.status ampliada de %s a %s para admitir %r",
        column["type"], new_type, value,
    )
    return True
