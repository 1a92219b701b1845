import importlib
from pathlib import Path
from config.database import engine, SessionLocal, Base

API_DIR = Path(__file__).parent.parent / "api"

# Dictionary to store loaded models keyed by table name
models = {}

def scan_models(directory: Path = API_DIR):
    """
    Import every `*_model.py` module under `api/` so all tables are
    registered on Base.metadata and string relationships resolve.
    """
    root = directory.parent
    for item in sorted(directory.rglob("*_model.py")):
        module_name = ".".join(item.relative_to(root).with_suffix("").parts)
        module = importlib.import_module(module_name)

        for attr_name in dir(module):
            attr = getattr(module, attr_name)
            if hasattr(attr, "__tablename__"):
                models[attr.__tablename__] = attr
    return models

scan_models()

# Create tables in the database
def init_db(bind=engine):
    Base.metadata.create_all(bind=bind)

# Exporting components
__all__ = ["engine", "SessionLocal", "Base", "models", "init_db"]
