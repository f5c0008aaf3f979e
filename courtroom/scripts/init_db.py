from sqlmodel import SQLModel
from courtroom import models  # noqa: F401  (registers the archive tables)
from courtroom.config import get_settings
from courtroom.services import make_engine

def init_db():
    settings = get_settings()
    print(f"Creating transcript archive tables in {settings.db_url} ...")
    SQLModel.metadata.create_all(make_engine(settings.db_url))
    print("✅ Done.")

if __name__ == "__main__":
    init_db()
