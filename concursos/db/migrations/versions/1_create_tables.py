"""Announcements, CPVs, adjudication factors, alterations, archive, notes

Revision ID: 1_create_tables
Revises:
Create Date: 2025-06-02 10:00:00
"""

from alembic import op
import sqlalchemy as sa

from concursos.core.config import settings

revision = '1_create_tables'
down_revision = None
branch_labels = None
depends_on = None

schema = settings.DB_SCHEMA or None

def _fk(table: str) -> str:
    return f"{schema}.{table}.id" if schema else f"{table}.id"

def upgrade():
    # ### Таблица announcements ###
    op.create_table(
        'announcements',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('diario_id', sa.Integer(), nullable=True),
        sa.Column('issuer', sa.String(), nullable=True),
        sa.Column('number', sa.String(), nullable=True),
        sa.Column('pdf_url', sa.String(), nullable=True),
        sa.Column('summary', sa.Text(), nullable=True),
        sa.Column('processo_tipo', sa.String(), nullable=True),
        sa.Column('processo_preco_base_valor', sa.Numeric(precision=15, scale=2), nullable=True),
        sa.Column('base_price', sa.Numeric(precision=15, scale=2), nullable=True),
        sa.Column('asset_valuation', sa.Numeric(precision=15, scale=2), nullable=True),
        sa.Column('internal_id', sa.String(), nullable=True),
        sa.Column('object_designation', sa.Text(), nullable=True),
        sa.Column('object_description', sa.Text(), nullable=True),
        sa.Column('object_main_contract_type', sa.String(), nullable=True),
        sa.Column('object_contract_type', sa.String(), nullable=True),
        sa.Column('object_main_cpv', sa.String(), nullable=True),
        sa.Column('entity_designacao', sa.String(), nullable=True),
        sa.Column('entity_distrito', sa.String(), nullable=True),
        sa.Column('entity_concelho', sa.String(), nullable=True),
        sa.Column('publication_date', sa.DateTime(timezone=True), nullable=True),
        sa.Column('application_deadline', sa.String(), nullable=True),
        sa.Column('expired', sa.Boolean(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.Index('ix_announcements_id', 'id'),
        sa.Index('ix_announcements_internal_id', 'internal_id'),
        schema=schema
    )

    # ### Таблица cpvs ###
    op.create_table(
        'cpvs',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('announcement_id', sa.Integer(), nullable=False),
        sa.Column('code', sa.String(), nullable=False),
        sa.Column('base_price', sa.Numeric(precision=15, scale=2), nullable=True),
        sa.ForeignKeyConstraint(['announcement_id'], [_fk('announcements')], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.Index('ix_cpvs_id', 'id'),
        sa.Index('ix_cpvs_announcement_id', 'announcement_id'),
        sa.Index('ix_cpvs_code', 'code'),
        schema=schema
    )

    # ### Таблица adjudication_factors ###
    op.create_table(
        'adjudication_factors',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('announcement_id', sa.Integer(), nullable=False),
        sa.Column('factor_name', sa.String(), nullable=True),
        sa.Column('other_factor_name', sa.String(), nullable=True),
        sa.Column('percentage', sa.Numeric(precision=5, scale=2), nullable=True),
        sa.Column('sub_factor_name', sa.String(), nullable=True),
        sa.Column('sub_factor_percentage', sa.Numeric(precision=5, scale=2), nullable=True),
        sa.ForeignKeyConstraint(['announcement_id'], [_fk('announcements')], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.Index('ix_adjudication_factors_id', 'id'),
        sa.Index('ix_adjudication_factors_announcement_id', 'announcement_id'),
        schema=schema
    )

    # ### Таблица alterations ###
    op.create_table(
        'alterations',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('internal_id', sa.String(), nullable=False),
        sa.Column('previous_internal_id', sa.String(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.Index('ix_alterations_id', 'id'),
        sa.Index('ix_alterations_previous_internal_id', 'previous_internal_id'),
        schema=schema
    )

    # ### Таблица archive ###
    op.create_table(
        'archive',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('announcement_id', sa.Integer(), nullable=False),
        sa.Column('is_archived', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.ForeignKeyConstraint(['announcement_id'], [_fk('announcements')], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('announcement_id', name='uq_archive_announcement'),
        sa.Index('ix_archive_id', 'id'),
        schema=schema
    )

    # ### Таблица notes ###
    op.create_table(
        'notes',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('announcement_id', sa.Integer(), nullable=False),
        sa.Column('note_text', sa.Text(), nullable=False, server_default=''),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.ForeignKeyConstraint(['announcement_id'], [_fk('announcements')], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('announcement_id', name='uq_notes_announcement'),
        sa.Index('ix_notes_id', 'id'),
        schema=schema
    )

def downgrade():
    op.drop_table('notes', schema=schema)
    op.drop_table('archive', schema=schema)
    op.drop_table('alterations', schema=schema)
    op.drop_table('adjudication_factors', schema=schema)
    op.drop_table('cpvs', schema=schema)
    op.drop_table('announcements', schema=schema)
