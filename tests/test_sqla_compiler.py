"""Tests for the SQLAlchemy predicate compiler."""

from __future__ import annotations

import datetime

import pytest
from sqlalchemy import (
    Boolean,
    DateTime,
    Float,
    Integer,
    String,
    create_engine,
    select,
)
from sqlalchemy.dialects import postgresql
from sqlalchemy.orm import DeclarativeBase, Mapped, Session, mapped_column

from catalog_filters import (
    COURSE_FILTER_FIELDS,
    FieldNotFoundError,
    OperatorNotFoundError,
    Pagination,
    ProgramFilterOptions,
    STUDY_ABROAD_FILTER_FIELDS,
    build_catalog_predicate,
)
from catalog_filters.sqla import apply_pagination, build_sqla_filter


class CourseBase(DeclarativeBase):
    pass


class CourseRecord(CourseBase):
    __tablename__ = "courses"
    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    title: Mapped[str] = mapped_column(String)
    description: Mapped[str] = mapped_column(String, default="")
    shortDescription: Mapped[str] = mapped_column(
        "short_description", String, default=""
    )
    programName: Mapped[str] = mapped_column("program_name", String, default="")
    price: Mapped[float] = mapped_column(Float)
    durationMonths: Mapped[int] = mapped_column("duration_months", Integer)
    status: Mapped[str] = mapped_column(String, default="published")
    createdAt: Mapped[datetime.datetime] = mapped_column("created_at", DateTime)


class PgBase(DeclarativeBase):
    pass


class StudyAbroadRecord(PgBase):
    __tablename__ = "study_abroad"
    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    city: Mapped[str] = mapped_column(String)
    country: Mapped[str] = mapped_column(String)
    description: Mapped[str] = mapped_column(String)
    avgTuition: Mapped[float] = mapped_column("avg_tuition", Float)
    durationMonths: Mapped[int] = mapped_column("duration_months", Integer)
    partTimeAvailable: Mapped[bool] = mapped_column("part_time_available", Boolean)
    universities: Mapped[list[str]] = mapped_column(postgresql.ARRAY(String))
    status: Mapped[str] = mapped_column(String)


def _pg(expr) -> str:
    return str(expr.compile(dialect=postgresql.dialect()))


@pytest.fixture
def session():
    engine = create_engine("sqlite://")
    CourseBase.metadata.create_all(engine)
    base = datetime.datetime(2024, 1, 1)
    rows = [
        ("Python for Data Science", "pandas, numpy", 499.0, 3, "published"),
        ("Full Stack React", "Build SPAs", 899.0, 6, "published"),
        ("Data Engineering 100%", "Pipelines", 1299.0, 9, "published"),
        ("Cloud Basics", "AWS intro", 199.0, 1, "draft"),
    ]
    with Session(engine) as s:
        for i, (title, description, price, months, status) in enumerate(rows, 1):
            s.add(
                CourseRecord(
                    id=i,
                    title=title,
                    description=description,
                    price=price,
                    durationMonths=months,
                    status=status,
                    createdAt=base + datetime.timedelta(days=i),
                )
            )
        s.commit()
        yield s
    engine.dispose()


def _titles(session: Session, where) -> list[str]:
    stmt = select(CourseRecord).where(build_sqla_filter(CourseRecord, where))
    return [c.title for c in session.scalars(stmt.order_by(CourseRecord.id))]


# -- Execution against SQLite ------------------------------------------------


def test_catalog_predicate_executes(session: Session) -> None:
    options = ProgramFilterOptions(min_price=400, max_duration=6, keyword="REACT")
    where = build_catalog_predicate(options, COURSE_FILTER_FIELDS, status="published")
    assert _titles(session, where) == ["Full Stack React"]


def test_keyword_searches_every_mapped_field(session: Session) -> None:
    options = ProgramFilterOptions(keyword="numpy")
    where = build_catalog_predicate(options, COURSE_FILTER_FIELDS)
    assert _titles(session, where) == ["Python for Data Science"]


def test_like_wildcards_are_escaped(session: Session) -> None:
    where = {"title": {"contains": "100%", "mode": "insensitive"}}
    assert _titles(session, where) == ["Data Engineering 100%"]
    assert _titles(session, {"title": {"contains": "%"}}) == ["Data Engineering 100%"]


def test_empty_predicate_matches_all(session: Session) -> None:
    assert len(_titles(session, {})) == 4


def test_or_and_not(session: Session) -> None:
    where = {
        "OR": [{"durationMonths": {"lte": 1}}, {"durationMonths": {"gte": 9}}],
        "NOT": [{"status": "draft"}],
    }
    assert _titles(session, where) == ["Data Engineering 100%"]


def test_empty_or_matches_nothing(session: Session) -> None:
    assert _titles(session, {"OR": []}) == []


def test_in_and_not_in(session: Session) -> None:
    assert _titles(session, {"durationMonths": {"in": [1, 3]}}) == [
        "Python for Data Science",
        "Cloud Basics",
    ]
    assert _titles(session, {"durationMonths": {"notIn": [1, 3, 6]}}) == [
        "Data Engineering 100%"
    ]


def test_apply_pagination(session: Session) -> None:
    stmt = apply_pagination(
        select(CourseRecord),
        CourseRecord,
        Pagination(page=2, limit=2),
        order_by=["-price"],
    )
    assert [c.price for c in session.scalars(stmt)] == [499.0, 199.0]


def test_apply_pagination_ascending(session: Session) -> None:
    stmt = apply_pagination(
        select(CourseRecord), CourseRecord, Pagination(1, 1), order_by=["createdAt"]
    )
    assert [c.id for c in session.scalars(stmt)] == [1]


# -- Compilation (PostgreSQL) ------------------------------------------------


def test_study_abroad_compiles_to_postgres() -> None:
    options = ProgramFilterOptions(
        min_price=1000, part_time=True, university="MIT", city="bos"
    )
    where = build_catalog_predicate(options, STUDY_ABROAD_FILTER_FIELDS)

    sql = _pg(build_sqla_filter(StudyAbroadRecord, where))

    assert "study_abroad.avg_tuition >=" in sql
    assert "study_abroad.part_time_available" in sql
    assert "ANY (study_abroad.universities)" in sql
    assert "study_abroad.city" in sql


def test_array_operators() -> None:
    some = _pg(
        build_sqla_filter(StudyAbroadRecord, {"universities": {"hasSome": ["a"]}})
    )
    every = _pg(
        build_sqla_filter(StudyAbroadRecord, {"universities": {"hasEvery": ["a"]}})
    )
    assert "&&" in some
    assert "@>" in every


def test_null_literal_uses_is() -> None:
    sql = _pg(build_sqla_filter(StudyAbroadRecord, {"country": None}))
    assert "study_abroad.country IS NULL" in sql
    sql = _pg(build_sqla_filter(StudyAbroadRecord, {"country": {"not": None}}))
    assert "study_abroad.country IS NOT NULL" in sql


# -- Errors ------------------------------------------------------------------


def test_unknown_field_suggests_close_match() -> None:
    with pytest.raises(FieldNotFoundError) as exc_info:
        build_sqla_filter(CourseRecord, {"durationMonth": {"gte": 1}})
    error = exc_info.value
    assert error.model_name == "CourseRecord"
    assert "durationMonths" in error.suggestions
    assert error.to_dict()["error"] == "FIELD_NOT_FOUND"


def test_unknown_operator() -> None:
    with pytest.raises(OperatorNotFoundError):
        build_sqla_filter(CourseRecord, {"price": {"between": [1, 2]}})


def test_unknown_order_field() -> None:
    with pytest.raises(FieldNotFoundError):
        apply_pagination(
            select(CourseRecord), CourseRecord, Pagination(1, 10), order_by=["-cost"]
        )
