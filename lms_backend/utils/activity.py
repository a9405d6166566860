import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from lms_backend.models.activity import Activity

logger = logging.getLogger(__name__)

ACTIVITY_ACTIONS = {
    'USER_CREATED': 'created user',
    'USER_UPDATED': 'updated user',
    'USER_DELETED': 'deleted user',
    'COURSE_CREATED': 'created course',
    'COURSE_UPDATED': 'updated course',
    'COURSE_DELETED': 'deleted course',
    'MATERIAL_UPLOADED': 'uploaded material',
    'MATERIAL_UPDATED': 'updated material',
    'MATERIAL_DELETED': 'deleted material',
    'LECTURE_CREATED': 'created lecture',
    'LECTURE_UPDATED': 'updated lecture',
    'LECTURE_DELETED': 'deleted lecture',
    'LECTURE_RECORDED': 'uploaded lecture recording',
    'MEETING_CREATED': 'created meeting',
    'MEETING_UPDATED': 'updated meeting',
    'MEETING_DELETED': 'deleted meeting',
    'NOTICE_CREATED': 'created notice',
    'NOTICE_UPDATED': 'updated notice',
    'NOTICE_DELETED': 'deleted notice',
    'STUDENT_ENROLLED': 'enrolled student',
    'STUDENT_UNENROLLED': 'unenrolled student',
}


def create_activity(db: Session, actor_id: int, action: str, entity: str, entity_id) -> bool:
    """Record one activity feed entry.

    Failures are logged and reported through the return value so that the
    operation being recorded is never rolled back because of its audit entry.
    """
    try:
        db.add(Activity(actor_id=actor_id, action=action, entity=entity, entity_id=str(entity_id)))
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception('Failed to create activity %r for %s %s', action, entity, entity_id)
        return False

    return True
