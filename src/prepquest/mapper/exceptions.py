"""
Mapper 예외

DB 드라이버 / SQLAlchemy 예외는 그대로 전파하고,
매퍼 사용 오류만 여기서 정의
"""


class MapperError(Exception):
    """매퍼 사용 오류 기본 클래스"""


class UnknownColumnError(MapperError):
    """엔티티에 매핑되지 않은 컬럼 이름"""

    def __init__(self, entity_name: str, column: str):
        self.entity_name = entity_name
        self.column = column
        super().__init__(f"{entity_name} has no mapped column '{column}'")


class TooManyResultsError(MapperError):
    """select_one 조건에 2건 이상이 일치"""
