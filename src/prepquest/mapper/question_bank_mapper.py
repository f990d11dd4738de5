"""
QuestionBank Mapper

question_bank(문제은행) 테이블에 대한 DB I/O 담당
"""
from prepquest.database.models import QuestionBank
from prepquest.mapper.base_mapper import BaseMapper


class QuestionBankMapper(BaseMapper[QuestionBank]):
    """QuestionBank CRUD"""
