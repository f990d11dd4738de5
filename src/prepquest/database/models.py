from sqlalchemy import Column, Integer, BigInteger, SmallInteger, String, Text, DateTime
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

Base = declarative_base()

# SQLite는 INTEGER PRIMARY KEY 에서만 자동 증가
BigIntPK = BigInteger().with_variant(Integer, "sqlite")


class AuditMixin:
    """생성/수정 시각 + 논리 삭제 플래그 공통 컬럼"""
    __logic_delete_column__ = "is_delete"

    user_id = Column(BigInteger, nullable=True)
    create_time = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    edit_time = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    update_time = Column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )
    is_delete = Column(SmallInteger, default=0, server_default="0", nullable=False)

    def to_dict(self):
        return {c.name: getattr(self, c.key) for c in self.__table__.columns}

    def __repr__(self):
        return f"<{type(self).__name__} id={self.id} title={self.title!r}>"


class Question(AuditMixin, Base):
    __tablename__ = "question"
    id = Column(BigIntPK, primary_key=True, autoincrement=True)
    title = Column(String(256), nullable=True)
    content = Column(Text, nullable=True)
    tags = Column(String(1024), nullable=True)  # JSON 배열 문자열
    answer = Column(Text, nullable=True)


class QuestionBank(AuditMixin, Base):
    __tablename__ = "question_bank"
    id = Column(BigIntPK, primary_key=True, autoincrement=True)
    title = Column(String(256), nullable=True)
    description = Column(Text, nullable=True)
    picture = Column(String(2048), nullable=True)
