"""Seed a complete demo dataset: teachers, students, courses, enrollments,
notices and meetings.

Usage:
    python -m lms_backend.seed_complete

Existing users, courses and enrollments are reused, so the script can be
run repeatedly. Notices and meetings are appended on every run.
"""
import logging
import sys
from dataclasses import dataclass

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from lms_backend.auth.passwords import hash_password
from lms_backend.core import config
from lms_backend.core.logging_config import configure_logging
from lms_backend.database import SessionLocal, init_db
from lms_backend.models.course import Course
from lms_backend.models.enrollment import Enrollment
from lms_backend.models.meeting import Meeting
from lms_backend.models.notice import Notice
from lms_backend.models.user import User
from lms_backend.seed_courses import LEVEL_DATA, build_level_course
from lms_backend.utils.activity import ACTIVITY_ACTIONS, create_activity

logger = logging.getLogger(__name__)

SAMPLE_PASSWORD = 'password123'
ENROLLED_COURSES_PER_STUDENT = 2

SAMPLE_TEACHERS = [
    {'email': 'yuki.sato@example.com', 'name': 'Yuki Sato', 'role': 'TEACHER'},
    {'email': 'takeshi.nakamura@example.com', 'name': 'Takeshi Nakamura', 'role': 'TEACHER'},
    {'email': 'sakura.tanaka@example.com', 'name': 'Sakura Tanaka', 'role': 'TEACHER'},
    {'email': 'hiroshi.yamamoto@example.com', 'name': 'Hiroshi Yamamoto', 'role': 'TEACHER'},
]

SAMPLE_STUDENTS = [
    {'email': 'student1@example.com', 'name': 'John Smith', 'role': 'STUDENT'},
    {'email': 'student2@example.com', 'name': 'Sarah Johnson', 'role': 'STUDENT'},
    {'email': 'student3@example.com', 'name': 'Mike Davis', 'role': 'STUDENT'},
]

SAMPLE_NOTICES = [
    {
        'title': 'Welcome to Japanese Learning!',
        'body': "Welcome to our comprehensive Japanese language learning platform. We're excited to have you on this journey to mastering Japanese!",
        'course_id': None,
    },
    {
        'title': 'Beginner Course Materials Available',
        'body': 'New study materials have been uploaded for the Beginner course. Check them out in the materials section!',
        'course_id': 'beginner',
    },
    {
        'title': 'Weekly Meeting Schedule',
        'body': "Don't forget our weekly online meetings. Check the meetings section for the latest schedule.",
        'course_id': None,
    },
]

SAMPLE_MEETINGS = [
    {'title': 'Beginner Level Orientation', 'meet_link': 'https://meet.google.com/abc-defg-hij', 'course_id': 'beginner'},
    {'title': 'Elementary Grammar Session', 'meet_link': 'https://meet.google.com/klm-nop-qrs', 'course_id': 'elementary'},
    {'title': 'Intermediate Conversation Practice', 'meet_link': 'https://meet.google.com/tuv-wxy-zab', 'course_id': 'intermediate'},
]


@dataclass
class SeedSummary:
    teachers: int = 0
    students: int = 0
    courses: int = 0
    enrollments: int = 0
    notices: int = 0
    meetings: int = 0


def get_or_create_user(db: Session, data: dict) -> User:
    existing = db.query(User).filter(User.email == data['email']).first()
    if existing:
        logger.info('User already exists: %s', existing.name)
        return existing

    user = User(
        email=data['email'],
        name=data['name'],
        role=data['role'],
        hashed_password=hash_password(SAMPLE_PASSWORD, rounds=config.SEED_BCRYPT_ROUNDS),
    )
    db.add(user)
    db.flush()
    logger.info('Created %s: %s', data['role'].lower(), user.name)
    return user


def get_or_create_course(db: Session, level: dict, teacher: User) -> tuple[Course, bool]:
    existing = db.get(Course, level['id'])
    if existing:
        logger.info('Course already exists: %s', existing.title)
        return existing, False

    course = build_level_course(level)
    course.teachers.append(teacher)
    db.add(course)
    db.flush()
    logger.info('Created course: %s', course.title)
    return course, True


def enroll(db: Session, student: User, course: Course) -> bool:
    existing = db.query(Enrollment).filter(
        Enrollment.student_id == student.id,
        Enrollment.course_id == course.id,
    ).first()
    if existing:
        return False

    db.add(Enrollment(student_id=student.id, course_id=course.id))
    db.flush()
    logger.info('Enrolled %s in %s', student.name, course.title)
    return True


def seed_complete(db: Session) -> SeedSummary:
    summary = SeedSummary()
    # (actor_id, action key, course id), recorded once the seed is committed
    activities: list[tuple[int, str, str]] = []

    try:
        teachers = [get_or_create_user(db, data) for data in SAMPLE_TEACHERS]
        students = [get_or_create_user(db, data) for data in SAMPLE_STUDENTS]
        summary.teachers = len(teachers)
        summary.students = len(students)

        courses = []
        for index, level in enumerate(LEVEL_DATA):
            teacher = teachers[index % len(teachers)]
            course, created = get_or_create_course(db, level, teacher)
            if created:
                activities.append((teacher.id, 'COURSE_CREATED', course.id))
            courses.append(course)
        summary.courses = len(courses)

        for student in students:
            for course in courses[:ENROLLED_COURSES_PER_STUDENT]:
                if enroll(db, student, course):
                    summary.enrollments += 1
                    activities.append((student.id, 'STUDENT_ENROLLED', course.id))

        for notice in SAMPLE_NOTICES:
            db.add(Notice(**notice, posted_by=teachers[0].id))
        summary.notices = len(SAMPLE_NOTICES)

        for meeting in SAMPLE_MEETINGS:
            db.add(Meeting(**meeting, created_by=teachers[0].id))
        summary.meetings = len(SAMPLE_MEETINGS)

        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise

    for actor_id, action, course_id in activities:
        create_activity(db, actor_id, ACTIVITY_ACTIONS[action], 'course', course_id)

    return summary


def print_summary(summary: SeedSummary) -> None:
    print('\nDatabase seeding completed successfully!')
    print('\nSummary:')
    print(f'   Teachers: {summary.teachers}')
    print(f'   Students: {summary.students}')
    print(f'   Courses: {summary.courses}')
    print(f'   Enrollments: {summary.enrollments}')
    print(f'   Notices: {summary.notices}')
    print(f'   Meetings: {summary.meetings}')
    print('\nSample Login Credentials:')
    print(f'   Teacher: {SAMPLE_TEACHERS[0]["email"]} / {SAMPLE_PASSWORD}')
    print(f'   Student: {SAMPLE_STUDENTS[0]["email"]} / {SAMPLE_PASSWORD}')


def main() -> None:
    configure_logging()
    init_db()
    db = SessionLocal()
    try:
        summary = seed_complete(db)
    except SQLAlchemyError:
        logger.exception('Seeding failed')
        sys.exit(1)
    finally:
        db.close()

    print_summary(summary)


if __name__ == "__main__":
    main()
