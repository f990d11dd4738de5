from contextlib import contextmanager
import os
import logging
from dotenv import load_dotenv
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from prepquest.database.models import Base

load_dotenv()

logger = logging.getLogger(__name__)

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///prepquest.db")
DATABASE_ECHO = os.getenv("DATABASE_ECHO", "false").lower() == "true"

# 1. 엔진 생성
engine = create_engine(DATABASE_URL, echo=DATABASE_ECHO, pool_pre_ping=True)

# 2. 세션 팩토리 생성
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@contextmanager
def session_scope():
    db = SessionLocal()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


def init_db(bind=None):
    """question / question_bank 테이블 생성 (이미 있으면 건너뜀)"""
    target = bind if bind is not None else engine
    Base.metadata.create_all(bind=target)
    logger.info(f"Tables ready: {', '.join(Base.metadata.tables)}")
