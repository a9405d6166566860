import pytest
from sqlalchemy.exc import OperationalError

from lms_backend.models.activity import Activity
from lms_backend.utils.activity import ACTIVITY_ACTIONS, create_activity


def test_activity_actions_cover_every_managed_entity() -> None:
    assert len(ACTIVITY_ACTIONS) == 21
    assert ACTIVITY_ACTIONS['USER_CREATED'] == 'created user'
    assert ACTIVITY_ACTIONS['LECTURE_RECORDED'] == 'uploaded lecture recording'
    assert ACTIVITY_ACTIONS['STUDENT_UNENROLLED'] == 'unenrolled student'


def test_create_activity_inserts_row(db) -> None:
    assert create_activity(db, 7, ACTIVITY_ACTIONS['COURSE_CREATED'], 'course', 'beginner') is True

    activity = db.query(Activity).one()
    assert activity.actor_id == 7
    assert activity.action == 'created course'
    assert activity.entity == 'course'
    assert activity.entity_id == 'beginner'
    assert activity.created_at is not None


def test_create_activity_logs_and_reports_database_failure(caplog: pytest.LogCaptureFixture) -> None:
    class BrokenSession:
        rolled_back = False

        def add(self, _obj):
            pass

        def commit(self):
            raise OperationalError('INSERT INTO activities', {}, Exception('database is locked'))

        def rollback(self):
            self.rolled_back = True

    session = BrokenSession()

    assert create_activity(session, 1, ACTIVITY_ACTIONS['NOTICE_CREATED'], 'notice', 3) is False
    assert session.rolled_back is True
    assert 'Failed to create activity' in caplog.text
