"""widen check_ins.status so it accepts Discrepancia

Bases heredadas pueden tener status como ENUM sin 'Discrepancia' o como
VARCHAR corto. En instalaciones nuevas (a1initial01) no hace nada.

Revision ID: b2statuswide02
Revises: a1initial01
Create Date: 2026-10-19
"""

from alembic import op

from models.check_in import CheckInStatus
from services.schema_guard import ensure_check_in_status_supports

# --- Alembic identifiers (OBLIGATORIO) ---
revision = "b2statuswide02"
down_revision = "a1initial01"
branch_labels = None
depends_on = None


def upgrade():
    ensure_check_in_status_supports(op.get_bind(), CheckInStatus.DISCREPANCIA)


def downgrade():
    # No se reduce la columna: podría truncar estados ya guardados
    pass
