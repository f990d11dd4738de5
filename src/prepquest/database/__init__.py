"""
Database 모듈

DB 연결, 모델 정의
"""
from .connection import session_scope, engine, init_db
from .models import Base, Question, QuestionBank

__all__ = [
    'session_scope',
    'engine',
    'init_db',
    'Base',
    'Question',
    'QuestionBank',
]
