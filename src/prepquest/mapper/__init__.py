"""
Mapper 모듈

테이블별 DB I/O를 담당하는 레이어
"""
from .base_mapper import BaseMapper
from .exceptions import MapperError, TooManyResultsError, UnknownColumnError
from .page import Page
from .question_mapper import QuestionMapper
from .question_bank_mapper import QuestionBankMapper

__all__ = [
    'BaseMapper',
    'Page',
    'QuestionMapper',
    'QuestionBankMapper',
    'MapperError',
    'TooManyResultsError',
    'UnknownColumnError',
]
