from sqlalchemy import Column, DateTime, ForeignKey, Integer, MetaData, String, Table

metadata = MetaData()

usuario = Table(
    "usuario",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=False),
    Column("usuario", String(100), nullable=False, unique=True),
    Column("senha_hash", String(255), nullable=False),
)

zona = Table(
    "zona",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=False),
    Column("nome", String(100), nullable=False),
    Column("letra", String(1), nullable=False),
)

patio = Table(
    "patio",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=False),
    Column("nome", String(100), nullable=False),
)

status_grupo = Table(
    "status_grupo",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=False),
    Column("nome", String(100), nullable=False),
)

status = Table(
    "status",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=False),
    Column("nome", String(100), nullable=False),
    Column("status_grupo_id", Integer, ForeignKey("status_grupo.id"), nullable=False),
)

moto = Table(
    "moto",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=False),
    Column("placa", String(10), nullable=False, unique=True),
    Column("chassi", String(50), nullable=False, unique=True),
    Column("qr_code", String(255)),
    Column("data_entrada", DateTime, nullable=False),
    Column("previsao_entrega", DateTime),
    Column("fotos", String(1000)),
    Column("zona_id", Integer, ForeignKey("zona.id"), nullable=False),
    Column("patio_id", Integer, ForeignKey("patio.id"), nullable=False),
    Column("status_id", Integer, ForeignKey("status.id"), nullable=False),
    Column("observacoes", String(1000)),
)
