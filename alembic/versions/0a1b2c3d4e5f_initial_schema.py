"""initial_schema

Revision ID: 0a1b2c3d4e5f
Revises:
Create Date: 2026-10-16 09:00:00.000000

고객(cliente), 우선순위(prioridad), 상품 카테고리(categoria_producto),
주문(pedido) 테이블 생성.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import UUID

revision: str = "0a1b2c3d4e5f"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "cliente",
        sa.Column("id", UUID(as_uuid=True), primary_key=True, server_default=sa.text("gen_random_uuid()")),
        sa.Column("nombre", sa.String(255), nullable=False),
        sa.Column("correo", sa.String(255), nullable=False),
        sa.Column("telefono", sa.String(50), nullable=True),
        sa.Column("direccion", sa.Text(), nullable=True),
        sa.Column("fecha_creacion", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("fecha_modificacion", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.UniqueConstraint("correo", name="uq_cliente_correo"),
    )

    op.create_table(
        "prioridad",
        sa.Column("id", UUID(as_uuid=True), primary_key=True, server_default=sa.text("gen_random_uuid()")),
        sa.Column("nivel", sa.String(20), nullable=False),
        sa.Column("descripcion", sa.Text(), nullable=True),
        sa.Column("fecha_creacion", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("fecha_modificacion", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.UniqueConstraint("nivel", name="uq_prioridad_nivel"),
    )

    op.create_table(
        "categoria_producto",
        sa.Column("id", UUID(as_uuid=True), primary_key=True, server_default=sa.text("gen_random_uuid()")),
        sa.Column("categoria_producto", sa.String(30), nullable=False),
        sa.Column("descripcion_producto", sa.Text(), nullable=True),
        sa.Column("fecha_creacion", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("fecha_modificacion", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("estado_categoria", sa.String(20), nullable=False),
    )

    op.create_table(
        "pedido",
        sa.Column("id", UUID(as_uuid=True), primary_key=True, server_default=sa.text("gen_random_uuid()")),
        sa.Column("cliente_id", UUID(as_uuid=True), sa.ForeignKey("cliente.id", ondelete="RESTRICT"), nullable=False),
        sa.Column("prioridad_id", UUID(as_uuid=True), sa.ForeignKey("prioridad.id", ondelete="RESTRICT"), nullable=False),
        sa.Column("fecha_pedido", sa.DateTime(timezone=True), nullable=False),
        sa.Column("fecha_entrega", sa.DateTime(timezone=True), nullable=True),
        sa.Column("estado_pedido", sa.String(20), server_default="PENDING", nullable=False),
        sa.Column("monto_total", sa.Numeric(12, 2), nullable=False),
        sa.Column("metodo_pago", sa.String(20), nullable=False),
        sa.Column("direccion_envio", sa.Text(), nullable=False),
        sa.Column("fecha_modificacion", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("numero_seguimiento", sa.String(100), nullable=True),
    )
    op.create_index("ix_pedido_cliente_id", "pedido", ["cliente_id"])


def downgrade() -> None:
    op.drop_index("ix_pedido_cliente_id")
    op.drop_table("pedido")
    op.drop_table("categoria_producto")
    op.drop_table("prioridad")
    op.drop_table("cliente")
