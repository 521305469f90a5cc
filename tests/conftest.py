# tests/conftest.py
import os

# Настройки читаются при импорте приложения, поэтому задаём их заранее
os.environ.setdefault("DATABASE_USER", "test")
os.environ.setdefault("DATABASE_PASSWORD", "test")
os.environ.setdefault("DATABASE_NAME", "test")
os.environ.setdefault("DATABASE_URL_OVERRIDE", "sqlite://")
os.environ.setdefault("ENVIRONMENT", "development")

from datetime import timedelta
from decimal import Decimal

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from mercado_gaucho.core.limiter import limiter
from mercado_gaucho.core.security import hash_password
from mercado_gaucho.crud.base import utcnow
from mercado_gaucho.db.session import Base, enable_sqlite_foreign_keys
from mercado_gaucho.dependencies import get_db
from mercado_gaucho.main import app
from mercado_gaucho.models import Categoria, Producto, TokenAutenticacion, Usuario

# Используем in-memory SQLite для тестов - это быстро и изолированно.
# StaticPool: одно соединение на все сессии, иначе каждая увидит пустую БД
SQLALCHEMY_DATABASE_URL = "sqlite://"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
enable_sqlite_foreign_keys(engine)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db_session() -> Session:
    """
    Фикстура для создания чистой базы данных для каждого теста.
    """
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
async def client(db_session: Session):
    """HTTP-клиент поверх ASGI-приложения с подменённой сессией БД."""
    def override_get_db():
        db = TestingSessionLocal()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    limiter.reset()
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


# --- Тестовые данные ---

def crear_usuario(db: Session, email: str, tipo_usuario: str = "comprador", nombre: str = "Juan") -> Usuario:
    usuario = Usuario(
        nombre=nombre,
        apellido="Pérez",
        email=email,
        contrasena_hash=hash_password("secreto"),
        tipo_usuario=tipo_usuario,
    )
    db.add(usuario)
    db.commit()
    db.refresh(usuario)
    return usuario


def crear_token(db: Session, usuario: Usuario, valor: str, horas: int = 1) -> TokenAutenticacion:
    token = TokenAutenticacion(
        id_usuario=usuario.id_usuario,
        token=valor,
        expiracion=utcnow() + timedelta(hours=horas),
    )
    db.add(token)
    db.commit()
    db.refresh(token)
    return token


@pytest.fixture
def usuario(db_session: Session) -> Usuario:
    return crear_usuario(db_session, "juan@example.com")


@pytest.fixture
def vendedor(db_session: Session) -> Usuario:
    return crear_usuario(db_session, "vendedora@example.com", tipo_usuario="vendedor", nombre="Ana")


@pytest.fixture
def admin(db_session: Session) -> Usuario:
    return crear_usuario(db_session, "admin@example.com", tipo_usuario="administrador", nombre="Admin")


@pytest.fixture
def categoria(db_session: Session) -> Categoria:
    categoria = Categoria(nombre_categoria="Mates", descripcion="Mates y bombillas")
    db_session.add(categoria)
    db_session.commit()
    db_session.refresh(categoria)
    return categoria


@pytest.fixture
def producto(db_session: Session, vendedor: Usuario, categoria: Categoria) -> Producto:
    producto = Producto(
        id_usuario=vendedor.id_usuario,
        id_categoria=categoria.id_categoria,
        titulo="Mate de calabaza",
        descripcion="Mate artesanal con virola de alpaca",
        precio=Decimal("75.00"),
        stock=10,
        estado="nuevo",
    )
    db_session.add(producto)
    db_session.commit()
    db_session.refresh(producto)
    return producto


@pytest.fixture
def nuevo_usuario(db_session: Session):
    """Фабрика пользователей для тестов, которым нужно несколько ролей."""
    def _crear(email: str, tipo_usuario: str = "comprador", nombre: str = "Juan") -> Usuario:
        return crear_usuario(db_session, email, tipo_usuario=tipo_usuario, nombre=nombre)
    return _crear


@pytest.fixture
def nuevo_token(db_session: Session):
    """Фабрика токенов; отрицательные часы дают уже истёкший токен."""
    def _crear(usuario: Usuario, valor: str, horas: int = 1) -> TokenAutenticacion:
        return crear_token(db_session, usuario, valor, horas=horas)
    return _crear
