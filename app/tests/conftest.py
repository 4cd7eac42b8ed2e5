"""Configuration et fixtures pytest"""

import os
import tempfile

os.environ.setdefault("DATABASE_URL", "sqlite:///./test.db")
os.environ.setdefault("UPLOAD_DIR", tempfile.mkdtemp(prefix="catalog-uploads-"))

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from app.core.database import Base, get_db
from app.core.dependencies import get_upload_storage
from app.main import app
from app.models.product import Product
from app.services.upload_service import UploadStorage

# Database de test
SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///./test.db"

engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL, connect_args={"check_same_thread": False}
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db():
    """Fixture de base de données pour les tests"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def upload_dir(tmp_path):
    """Répertoire d'upload isolé par test"""
    directory = tmp_path / "uploads"
    directory.mkdir()
    return directory


@pytest.fixture(scope="function")
def client(db, upload_dir):
    """Fixture du client de test FastAPI"""

    def override_get_db():
        try:
            yield db
        finally:
            pass

    def override_get_upload_storage():
        return UploadStorage(str(upload_dir), max_files=10)

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_upload_storage] = override_get_upload_storage

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def test_product(db):
    """Fixture d'un produit de test"""
    product = Product(
        title="Modern Kitchen Cabinet",
        subtitle="Contemporary Design",
        description="A sleek and modern kitchen cabinet with premium finish.",
        images=["1748917559260.jpg"],
        category="kitchen",
        features=["Premium wood finish", "Soft-close hinges"],
        specifications={"material": "Solid wood", "color": "White"},
    )
    db.add(product)
    db.commit()
    db.refresh(product)
    return product


@pytest.fixture
def patio_product(db):
    """Fixture d'un second produit, autre catégorie"""
    product = Product(
        title="Outdoor Lounge Chair",
        description="Weather resistant lounge chair.",
        images=[],
        category="patio",
    )
    db.add(product)
    db.commit()
    db.refresh(product)
    return product


@pytest.fixture
def missing_product_id():
    return "0" * 32
