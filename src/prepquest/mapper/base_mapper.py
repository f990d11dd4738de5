"""
Base Mapper

엔티티 하나(= 테이블 하나)에 대한 범용 CRUD.
QuestionMapper / QuestionBankMapper 는 이 클래스를 타입 인자만 바꿔 상속한다.
"""
import logging
from typing import Any, Dict, Generic, Iterable, List, Optional, Type, TypeVar, get_args

from sqlalchemy import inspect
from sqlalchemy.orm import Query, Session

from prepquest.database.models import Base
from prepquest.mapper.exceptions import MapperError, TooManyResultsError, UnknownColumnError
from prepquest.mapper.page import Page

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Base)

LOGIC_DELETED = 1
LOGIC_NOT_DELETED = 0


class BaseMapper(Generic[T]):
    """
    범용 CRUD 매퍼

    조건(conditions)은 SQLAlchemy 컬럼 표현식 (예: Question.title == "x").
    엔티티에 __logic_delete_column__ 이 있으면 삭제는 플래그 UPDATE 로 처리되고,
    조회/수정/카운트는 삭제되지 않은 행만 대상으로 한다.
    """

    entity: Type[T]

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        # class FooMapper(BaseMapper[Foo]) 형태면 타입 인자에서 엔티티 결정
        if "entity" in cls.__dict__:
            return
        for base in cls.__dict__.get("__orig_bases__", ()):
            args = get_args(base)
            if args and isinstance(args[0], type):
                cls.entity = args[0]
                return

    def __init__(self, db: Session):
        if getattr(self, "entity", None) is None:
            raise MapperError(f"{type(self).__name__} is not bound to an entity")
        self.db = db

    @property
    def table_name(self) -> str:
        return self.entity.__tablename__

    @property
    def _pk(self):
        return inspect(self.entity).primary_key[0]

    @property
    def _pk_name(self) -> str:
        return inspect(self.entity).get_property_by_column(self._pk).key

    def _logic_column(self):
        name = getattr(self.entity, "__logic_delete_column__", None)
        return getattr(self.entity, name) if name else None

    def _query(self, *conditions) -> Query:
        query = self.db.query(self.entity)
        logic_col = self._logic_column()
        if logic_col is not None:
            query = query.filter(logic_col == LOGIC_NOT_DELETED)
        if conditions:
            query = query.filter(*conditions)
        return query

    def _column_names(self) -> List[str]:
        return [attr.key for attr in inspect(self.entity).column_attrs]

    def _map_conditions(self, columns: Dict[str, Any]) -> list:
        """{"title": "x"} -> [Entity.title == "x"]"""
        known = self._column_names()
        conditions = []
        for name, value in columns.items():
            if name not in known:
                raise UnknownColumnError(self.entity.__name__, name)
            conditions.append(getattr(self.entity, name) == value)
        return conditions

    def _map_values(self, values: Dict[str, Any]) -> Dict[Any, Any]:
        known = self._column_names()
        mapped = {}
        for name, value in values.items():
            if name not in known:
                raise UnknownColumnError(self.entity.__name__, name)
            mapped[getattr(self.entity, name)] = value
        return mapped

    def _check_entity(self, entity, operation: str) -> None:
        if not isinstance(entity, self.entity):
            raise MapperError(
                f"{operation} on {self.table_name} expects {self.entity.__name__}, "
                f"got {type(entity).__name__}"
            )

    @staticmethod
    def _apply_order(query: Query, order_by) -> Query:
        if order_by is None:
            return query
        if isinstance(order_by, (list, tuple)):
            return query.order_by(*order_by)
        return query.order_by(order_by)

    def insert(self, entity: T) -> int:
        """
        엔티티 저장

        Args:
            entity: 저장할 엔티티 (생성된 키가 entity.id 에 채워짐)

        Returns:
            영향 받은 행 수 (이미 저장된 엔티티면 0)

        Raises:
            MapperError: 다른 테이블의 엔티티
        """
        self._check_entity(entity, "insert")
        state = inspect(entity)
        if state.has_identity:
            logger.warning(f"[insert] {self.table_name} id={state.identity[0]}: already persisted")
            return 0

        self.db.add(entity)
        self.db.flush()  # ID 획득
        logger.debug(f"[insert] {self.table_name} id={getattr(entity, self._pk_name)}")
        return 1

    def select_by_id(self, id: Any) -> Optional[T]:
        """기본 키로 조회 (없거나 논리 삭제된 경우 None)"""
        return self._query(self._pk == id).one_or_none()

    def select_batch_ids(self, ids: Iterable[Any]) -> List[T]:
        """
        기본 키 목록으로 조회

        Args:
            ids: 기본 키 목록 (비어 있으면 조회하지 않음)

        Returns:
            존재하는 행 리스트 (순서 보장 없음)
        """
        ids = list(ids)
        if not ids:
            return []
        return self._query(self._pk.in_(ids)).all()

    def select_by_map(self, columns: Dict[str, Any]) -> List[T]:
        """컬럼 이름:값 동등 조건 조회 (query by example)"""
        return self._query(*self._map_conditions(columns)).all()

    def select_one(self, *conditions) -> Optional[T]:
        """
        조건에 맞는 단건 조회

        Raises:
            TooManyResultsError: 2건 이상 일치
        """
        rows = self._query(*conditions).limit(2).all()
        if len(rows) > 1:
            raise TooManyResultsError(f"Expected one {self.table_name} row, found more")
        return rows[0] if rows else None

    def select_list(self, *conditions, order_by=None) -> List[T]:
        """
        조건에 맞는 행 목록 조회

        Args:
            conditions: 조회 조건 (없으면 전체)
            order_by: 정렬 표현식 또는 그 리스트

        Returns:
            행 리스트
        """
        return self._apply_order(self._query(*conditions), order_by).all()

    def select_count(self, *conditions) -> int:
        """조건에 맞는 행 수"""
        return self._query(*conditions).count()

    def exists(self, *conditions) -> bool:
        """조건에 맞는 행 존재 여부"""
        return self._query(*conditions).first() is not None

    def select_page(self, page: Page, *conditions, order_by=None) -> Page:
        """
        페이지 조회

        Args:
            page: 요청 페이지 (결과가 records / total 에 채워짐)
            conditions: 조회 조건
            order_by: 정렬 (생략 시 기본 키 오름차순)

        Returns:
            채워진 page 객체
        """
        query = self._query(*conditions)
        page.total = query.count()
        if page.total == 0 or page.offset >= page.total:
            page.records = []
            return page

        query = self._apply_order(query, order_by if order_by is not None else self._pk)
        page.records = query.offset(page.offset).limit(page.size).all()
        return page

    def update_by_id(self, entity: T) -> int:
        """
        기본 키가 같은 행에 엔티티의 None 이 아닌 값만 반영

        Returns:
            영향 받은 행 수 (행이 없으면 0)

        Raises:
            MapperError: 다른 테이블의 엔티티 또는 기본 키 누락
        """
        self._check_entity(entity, "update_by_id")
        pk_name = self._pk_name
        id = getattr(entity, pk_name)
        if id is None:
            raise MapperError(f"update_by_id on {self.table_name} requires '{pk_name}'")

        values = {
            name: getattr(entity, name)
            for name in self._column_names()
            if name != pk_name and getattr(entity, name) is not None
        }
        if not values:
            logger.warning(f"[update_by_id] {self.table_name} id={id}: nothing to update")
            return 0

        count = self._query(self._pk == id).update(
            self._map_values(values),
            synchronize_session="fetch"
        )
        logger.debug(f"[update_by_id] {self.table_name} id={id} rows={count}")
        return count

    def update(self, values: Dict[str, Any], *conditions) -> int:
        """
        조건에 맞는 행 일괄 수정 (조건 없는 전체 수정은 거부)

        Returns:
            영향 받은 행 수
        """
        if not conditions:
            raise MapperError(f"Refusing to update every row of {self.table_name}")
        if not values:
            return 0

        count = self._query(*conditions).update(
            self._map_values(values),
            synchronize_session="fetch"
        )
        logger.debug(f"[update] {self.table_name} rows={count}")
        return count

    def delete_by_id(self, id: Any) -> int:
        """
        기본 키로 삭제

        Returns:
            영향 받은 행 수 (없거나 이미 삭제된 경우 0)
        """
        return self.delete(self._pk == id)

    def delete_batch_ids(self, ids: Iterable[Any]) -> int:
        """기본 키 목록으로 삭제 (빈 목록이면 0)"""
        ids = list(ids)
        if not ids:
            return 0
        return self.delete(self._pk.in_(ids))

    def delete_by_map(self, columns: Dict[str, Any]) -> int:
        """컬럼 이름:값 동등 조건 삭제 (빈 map 은 전체 삭제로 간주해 거부)"""
        return self.delete(*self._map_conditions(columns))

    def delete(self, *conditions) -> int:
        """
        조건에 맞는 행 삭제 (논리 삭제 컬럼이 있으면 플래그만 변경)

        Raises:
            MapperError: 조건 없이 호출
        """
        if not conditions:
            raise MapperError(f"Refusing to delete every row of {self.table_name}")

        query = self._query(*conditions)
        logic_col = self._logic_column()
        if logic_col is not None:
            count = query.update({logic_col: LOGIC_DELETED}, synchronize_session="fetch")
        else:
            count = query.delete(synchronize_session="fetch")

        if count == 0:
            logger.warning(f"[delete] {self.table_name}: no rows matched")
        else:
            logger.debug(f"[delete] {self.table_name} rows={count}")
        return count
