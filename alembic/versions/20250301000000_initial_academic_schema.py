"""Initial academic schema: accounts, roles, catalogue, people, enrollments, payments.

Revision ID: 20250301000000
Revises:
Create Date: 2025-03-01

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "20250301000000"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

DEFAULT_ROLES = ("Administrador", "Docente", "Secretaria")


def upgrade() -> None:
    roles = op.create_table(
        "roles",
        sa.Column("rol_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("nombre_rol", sa.String(length=64), nullable=False),
        sa.PrimaryKeyConstraint("rol_id", name=op.f("pk_roles")),
        sa.UniqueConstraint("nombre_rol", name=op.f("uq_roles_nombre_rol")),
    )
    op.create_table(
        "usuarios",
        sa.Column("usuario_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("nombre_completo", sa.String(length=255), nullable=False),
        sa.Column("correo", sa.String(length=255), nullable=False),
        sa.Column("contrasena", sa.String(length=255), nullable=False),
        sa.Column("rol_id", sa.Integer(), nullable=False),
        sa.Column("estado", sa.Boolean(), server_default=sa.true(), nullable=False),
        sa.ForeignKeyConstraint(
            ["rol_id"], ["roles.rol_id"], name=op.f("fk_usuarios_rol_id_roles")
        ),
        sa.PrimaryKeyConstraint("usuario_id", name=op.f("pk_usuarios")),
    )
    op.create_index(op.f("ix_usuarios_correo"), "usuarios", ["correo"], unique=True)

    op.create_table(
        "planes_estudio",
        sa.Column("plan_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("nombre_plan", sa.String(length=255), nullable=False),
        sa.Column("anio_inicio", sa.Integer(), nullable=False),
        sa.Column("estado", sa.Boolean(), server_default=sa.true(), nullable=False),
        sa.PrimaryKeyConstraint("plan_id", name=op.f("pk_planes_estudio")),
    )
    op.create_table(
        "materias",
        sa.Column("materia_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("codigo", sa.String(length=32), nullable=False),
        sa.Column("nombre", sa.String(length=255), nullable=False),
        sa.Column("creditos", sa.Integer(), nullable=False),
        sa.Column("plan_id", sa.Integer(), nullable=True),
        sa.Column("estado", sa.Boolean(), server_default=sa.true(), nullable=False),
        sa.ForeignKeyConstraint(
            ["plan_id"], ["planes_estudio.plan_id"], name=op.f("fk_materias_plan_id_planes_estudio")
        ),
        sa.PrimaryKeyConstraint("materia_id", name=op.f("pk_materias")),
    )
    op.create_index(op.f("ix_materias_codigo"), "materias", ["codigo"], unique=True)

    op.create_table(
        "periodos",
        sa.Column("periodo_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("nombre", sa.String(length=128), nullable=False),
        sa.Column("anio", sa.Integer(), nullable=False),
        sa.Column("fecha_inicio", sa.Date(), nullable=True),
        sa.Column("fecha_fin", sa.Date(), nullable=True),
        sa.Column("estado", sa.Boolean(), server_default=sa.true(), nullable=False),
        sa.PrimaryKeyConstraint("periodo_id", name=op.f("pk_periodos")),
    )

    op.create_table(
        "estudiantes",
        sa.Column("estudiante_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("cedula", sa.String(length=32), nullable=False),
        sa.Column("nombre", sa.String(length=255), nullable=False),
        sa.Column("fecha_nacimiento", sa.Date(), nullable=True),
        sa.Column("correo", sa.String(length=255), nullable=True),
        sa.Column("telefono", sa.String(length=32), nullable=True),
        sa.Column("estado", sa.Boolean(), server_default=sa.true(), nullable=False),
        sa.PrimaryKeyConstraint("estudiante_id", name=op.f("pk_estudiantes")),
    )
    op.create_index(op.f("ix_estudiantes_cedula"), "estudiantes", ["cedula"], unique=True)
    op.create_table(
        "profesores",
        sa.Column("profesor_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("nombre", sa.String(length=255), nullable=False),
        sa.Column("correo", sa.String(length=255), nullable=True),
        sa.Column("telefono", sa.String(length=32), nullable=True),
        sa.Column("estado", sa.Boolean(), server_default=sa.true(), nullable=False),
        sa.PrimaryKeyConstraint("profesor_id", name=op.f("pk_profesores")),
    )

    op.create_table(
        "matriculas",
        sa.Column("matricula_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("estudiante_id", sa.Integer(), nullable=False),
        sa.Column("periodo_id", sa.Integer(), nullable=False),
        sa.Column("fecha", sa.Date(), server_default=sa.text("CURRENT_DATE"), nullable=False),
        sa.Column("estado", sa.String(length=32), nullable=False),
        sa.ForeignKeyConstraint(
            ["estudiante_id"],
            ["estudiantes.estudiante_id"],
            name=op.f("fk_matriculas_estudiante_id_estudiantes"),
        ),
        sa.ForeignKeyConstraint(
            ["periodo_id"], ["periodos.periodo_id"], name=op.f("fk_matriculas_periodo_id_periodos")
        ),
        sa.PrimaryKeyConstraint("matricula_id", name=op.f("pk_matriculas")),
    )
    op.create_index(op.f("ix_matriculas_estudiante_id"), "matriculas", ["estudiante_id"], unique=False)
    op.create_index(op.f("ix_matriculas_periodo_id"), "matriculas", ["periodo_id"], unique=False)
    op.create_table(
        "pagos",
        sa.Column("pago_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("matricula_id", sa.Integer(), nullable=False),
        sa.Column("monto", sa.Numeric(precision=10, scale=2), nullable=False),
        sa.Column("fecha_pago", sa.Date(), server_default=sa.text("CURRENT_DATE"), nullable=False),
        sa.Column("metodo", sa.String(length=64), nullable=False),
        sa.Column("referencia", sa.String(length=128), nullable=True),
        sa.Column("estado", sa.String(length=32), nullable=False),
        sa.ForeignKeyConstraint(
            ["matricula_id"],
            ["matriculas.matricula_id"],
            name=op.f("fk_pagos_matricula_id_matriculas"),
        ),
        sa.PrimaryKeyConstraint("pago_id", name=op.f("pk_pagos")),
    )
    op.create_index(op.f("ix_pagos_matricula_id"), "pagos", ["matricula_id"], unique=False)

    op.bulk_insert(roles, [{"nombre_rol": nombre} for nombre in DEFAULT_ROLES])


def downgrade() -> None:
    op.drop_index(op.f("ix_pagos_matricula_id"), table_name="pagos")
    op.drop_table("pagos")
    op.drop_index(op.f("ix_matriculas_periodo_id"), table_name="matriculas")
    op.drop_index(op.f("ix_matriculas_estudiante_id"), table_name="matriculas")
    op.drop_table("matriculas")
    op.drop_table("profesores")
    op.drop_index(op.f("ix_estudiantes_cedula"), table_name="estudiantes")
    op.drop_table("estudiantes")
    op.drop_table("periodos")
    op.drop_index(op.f("ix_materias_codigo"), table_name="materias")
    op.drop_table("materias")
    op.drop_table("planes_estudio")
    op.drop_index(op.f("ix_usuarios_correo"), table_name="usuarios")
    op.drop_table("usuarios")
    op.drop_table("roles")
