"""
Question Mapper

question(문제) 테이블에 대한 DB I/O 담당
"""
from prepquest.database.models import Question
from prepquest.mapper.base_mapper import BaseMapper


class QuestionMapper(BaseMapper[Question]):
    """Question CRUD"""
