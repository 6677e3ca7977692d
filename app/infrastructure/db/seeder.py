"""
Carga inicial de datos de demostración.

Se ejecuta en el arranque (si SEED_ON_STARTUP está activo) y desde
scripts/seed_db.py. Si ya existe algún usuario no inserta nada, así que
puede llamarse en cada arranque sin duplicar filas.
"""

import logging
from datetime import timedelta
from typing import Callable

from sqlalchemy import func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.interfaces.clock import Clock
from app.infrastructure.db.tables import moto, patio, status, status_grupo, usuario, zona

logger = logging.getLogger(__name__)

USUARIOS = [
    (1, "admin", "admin@123"),
    (2, "operador", "123456"),
    (3, "supervisor", "super@2024"),
]

ZONAS = [
    (1, "Zona Norte", "N"),
    (2, "Zona Sul", "S"),
    (3, "Zona Leste", "L"),
    (4, "Zona Oeste", "O"),
    (5, "Zona Central", "C"),
]

PATIOS = [
    (1, "Pátio Principal SP"),
    (2, "Pátio Guarulhos"),
    (3, "Pátio ABC"),
    (4, "Pátio Osasco"),
    (5, "Pátio Vila Madalena"),
]

STATUS_GRUPOS = [
    (1, "Operacional"),
    (2, "Manutenção"),
    (3, "Exceção"),
]

STATUSES = [
    (1, "Disponível", 1),
    (2, "Em Uso", 1),
    (3, "Reservado", 1),
    (4, "Manutenção Preventiva", 2),
    (5, "Manutenção Corretiva", 2),
    (6, "Aguardando Peças", 2),
    (7, "Sinistro", 3),
    (8, "Furtado", 3),
    (9, "Baixado", 3),
]

# (id, placa, días desde la entrada, días hasta la entrega, zona, patio, status, observaciones, fotos)
MOTOS = [
    (1, "ABC1D23", 30, 1, 1, 1, 1, "Moto em perfeito estado - Honda CG 160", None),
    (2, "EFG4H56", 25, None, 2, 2, 1, "Yamaha Factor 125 - Revisão em dia", None),
    (3, "IJK7L89", 20, None, 3, 1, 2, "Honda CG 160 Start - Entregador: João Silva", None),
    (
        4, "MNO0P12", 15, 3, 1, 3, 4, "Troca de óleo e filtros agendada",
        "manutencao_001.jpg,manutencao_002.jpg",
    ),
    (5, "QRS3T45", 10, None, 4, 4, 5, "Problema no motor - aguardando diagnóstico", None),
    (6, "UVW6X78", 5, 7, 5, 5, 3, "Reservado para entregador premium - Maria Santos", None),
    (
        7, "YZA9B01", 45, None, 2, 2, 7, "Acidente na Av. Paulista - aguardando perícia",
        "sinistro_001.jpg,sinistro_002.jpg,sinistro_003.jpg",
    ),
    (8, "CDE2F34", 60, None, 3, 1, 6, "Yamaha Factor - aguardando kit de embreagem", None),
    (9, "GHI5J67", 12, None, 1, 3, 1, "Honda CG 160 Titan - Km: 25.000", None),
    (10, "KLM8N90", 8, None, 4, 4, 2, "Yamaha XTZ 150 - Entregador: Carlos Oliveira", None),
    (11, "PQR1S23", 18, None, 5, 5, 1, "Honda Bros 160 - Moto nova, baixa quilometragem", None),
    (12, "TUV4W56", 22, None, 2, 2, 4, "Honda CG 160 - Revisão dos 10.000 km", None),
    (13, "XYZ7A89", 35, None, 3, 1, 3, "Yamaha Factor 125 - Reservado para expansão Zona Leste", None),
    (14, "BCD0E12", 7, None, 1, 3, 1, "Honda CG 160 Start - Excelente estado", None),
    (15, "FGH3I45", 14, None, 4, 4, 5, "Yamaha XTZ 150 - Problema na transmissão", None),
]


def _moto_rows(clock: Clock) -> list[dict]:
    now = clock.now()
    rows = []
    for moto_id, placa, entrada_days, entrega_days, zona_id, patio_id, status_id, obs, fotos in MOTOS:
        rows.append(
            {
                "id": moto_id,
                "placa": placa,
                "chassi": f"9BWZZZ377VT004{250 + moto_id}",
                "qr_code": f"QR{moto_id:03d}",
                "data_entrada": now - timedelta(days=entrada_days),
                "previsao_entrega": (
                    now + timedelta(days=entrega_days) if entrega_days is not None else None
                ),
                "fotos": fotos,
                "zona_id": zona_id,
                "patio_id": patio_id,
                "status_id": status_id,
                "observacoes": obs,
            }
        )
    return rows


async def _already_seeded(session: AsyncSession) -> bool:
    result = await session.execute(select(usuario.c.id).limit(1))
    return result.scalar() is not None


async def table_counts(session: AsyncSession) -> dict[str, int]:
    counts = {}
    for table in (usuario, zona, patio, status_grupo, status, moto):
        result = await session.execute(select(func.count()).select_from(table))
        counts[table.name] = result.scalar_one()
    return counts


async def motos_by_status(session: AsyncSession) -> list[tuple[str, int]]:
    total = func.count(moto.c.id).label("total")
    stmt = (
        select(status.c.nome, total)
        .select_from(moto.join(status, moto.c.status_id == status.c.id))
        .group_by(status.c.nome)
        .order_by(total.desc(), status.c.nome)
    )
    result = await session.execute(stmt)
    return [(row.nome, row.total) for row in result.all()]


async def seed_database(
    session: AsyncSession, clock: Clock, password_hasher: Callable[[str], str]
) -> bool:
    """
    Inserta los datos iniciales en orden de dependencias.

    Returns:
        True si insertó datos, False si la base ya estaba poblada.
    """
    try:
        if await _already_seeded(session):
            logger.info("Seed skipped, database already has data")
            return False

        logger.info("Seeding initial data")
        await session.execute(
            insert(usuario),
            [
                {"id": i, "usuario": name, "senha_hash": password_hasher(senha)}
                for i, name, senha in USUARIOS
            ],
        )
        await session.execute(
            insert(zona), [{"id": i, "nome": nome, "letra": letra} for i, nome, letra in ZONAS]
        )
        await session.execute(insert(patio), [{"id": i, "nome": nome} for i, nome in PATIOS])
        await session.execute(
            insert(status_grupo), [{"id": i, "nome": nome} for i, nome in STATUS_GRUPOS]
        )
        await session.execute(
            insert(status),
            [{"id": i, "nome": nome, "status_grupo_id": g} for i, nome, g in STATUSES],
        )
        await session.execute(insert(moto), _moto_rows(clock))
        await session.commit()
    except Exception:
        await session.rollback()
        logger.error("Seeding failed", exc_info=True)
        raise

    logger.info("Seed completed", extra={"counts": await table_counts(session)})
    for status_nome, total in await motos_by_status(session):
        logger.info("Motos by status", extra={"status": status_nome, "total": total})
    return True
