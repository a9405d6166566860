import pytest
from sqlalchemy.exc import OperationalError

from lms_backend import seed_courses
from lms_backend.models.course import Course
from lms_backend.seed_courses import (
    JLPT_COURSES,
    LEVEL_DATA,
    build_level_course,
    parse_args,
    run,
    seed_jlpt_courses,
    seed_levels,
)


def test_build_level_course_formats_title_and_feature_list() -> None:
    course = build_level_course(LEVEL_DATA[0])

    assert course.id == 'beginner'
    assert course.title == 'Beginner - N5 Level'
    assert course.active is True
    assert course.description == (
        'Start your Japanese journey with basic vocabulary, greetings, and simple sentences.\n\n'
        '• Hiragana and Katakana mastery\n'
        '• Basic greetings and introductions\n'
        '• Simple sentence structures\n'
        '• Essential vocabulary (500+ words)'
    )


def test_seed_levels_creates_all_four_levels(db) -> None:
    created = seed_levels(db)

    assert [course.id for course in created] == ['beginner', 'elementary', 'intermediate', 'advanced']
    assert db.query(Course).count() == 4


def test_seed_levels_skips_when_any_level_exists(db) -> None:
    db.add(Course(id='advanced', title='Advanced - N2-N1 Levels'))
    db.commit()

    assert seed_levels(db) == []
    assert db.query(Course).count() == 1


def test_seed_jlpt_courses_is_all_or_nothing(db) -> None:
    created = seed_jlpt_courses(db)

    assert [course.title for course in created] == [course['title'] for course in JLPT_COURSES]
    assert all(len(course.id) == 32 for course in created)
    assert seed_jlpt_courses(db) == []
    assert db.query(Course).count() == 5


def test_parse_args_defaults_to_level_courses() -> None:
    assert parse_args([]).course_set == 'levels'
    assert parse_args(['--set', 'jlpt']).course_set == 'jlpt'


def test_parse_args_rejects_unknown_course_set() -> None:
    with pytest.raises(SystemExit):
        parse_args(['--set', 'klingon'])


def test_run_prints_created_courses(db, capsys: pytest.CaptureFixture) -> None:
    assert run('jlpt', db) == 0

    output = capsys.readouterr().out
    assert '  - JLPT N5 (Active)' in output
    assert 'Seed completed successfully!' in output


def test_run_returns_error_code_on_database_failure(db, monkeypatch: pytest.MonkeyPatch) -> None:
    def broken(_db):
        raise OperationalError('SELECT', {}, Exception('no such table: courses'))

    monkeypatch.setitem(seed_courses.SEEDERS, 'levels', broken)

    assert run('levels', db) == 1
