"""Seed the Japanese language courses.

Usage:
    python -m lms_backend.seed_courses            # the four level courses
    python -m lms_backend.seed_courses --set jlpt # JLPT N5-N1 courses

Each set is seeded all-or-nothing: if any course of the set already exists
the whole set is skipped.
"""
import argparse
import logging
import sys

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from lms_backend.core.logging_config import configure_logging
from lms_backend.database import SessionLocal, init_db
from lms_backend.models.course import Course

logger = logging.getLogger(__name__)

LEVEL_DATA = [
    {
        'id': 'beginner',
        'title': 'Beginner',
        'jlpt_level': 'N5 Level',
        'description': 'Start your Japanese journey with basic vocabulary, greetings, and simple sentences.',
        'features': [
            'Hiragana and Katakana mastery',
            'Basic greetings and introductions',
            'Simple sentence structures',
            'Essential vocabulary (500+ words)',
        ],
    },
    {
        'id': 'elementary',
        'title': 'Elementary',
        'jlpt_level': 'N4 Level',
        'description': 'Build on the basics with more complex grammar and expanded vocabulary.',
        'features': [
            'Basic Kanji (150+ characters)',
            'More complex sentence patterns',
            'Daily conversation skills',
            'Expanded vocabulary (1000+ words)',
        ],
    },
    {
        'id': 'intermediate',
        'title': 'Intermediate',
        'jlpt_level': 'N3 Level',
        'description': 'Develop fluency with advanced grammar and comprehensive communication skills.',
        'features': [
            'Intermediate Kanji (300+ characters)',
            'Complex grammar patterns',
            'Reading and comprehension skills',
            'Cultural context and nuances',
        ],
    },
    {
        'id': 'advanced',
        'title': 'Advanced',
        'jlpt_level': 'N2-N1 Levels',
        'description': 'Master Japanese with native-like proficiency and business-level communication.',
        'features': [
            'Advanced Kanji (1000+ characters)',
            'Business Japanese',
            'Advanced reading and writing',
            'Cultural mastery and idioms',
        ],
    },
]

JLPT_COURSES = [
    {
        'title': 'JLPT N5',
        'description': 'This is the first level for beginners. It shows that a person can understand some basic Japanese. This includes reading simple sentences and listening to short, slow conversations about everyday life.',
        'active': True,
    },
    {
        'title': 'JLPT N4',
        'description': 'This level builds on the basics. It shows a person can understand daily conversations and read simple texts on familiar topics. It means having a good knowledge of basic grammar and words.',
        'active': True,
    },
    {
        'title': 'JLPT N3',
        'description': 'This is the middle level. It shows a person can understand Japanese in many daily situations fairly well. This includes reading articles and following conversations spoken at an almost normal speed.',
        'active': True,
    },
    {
        'title': 'JLPT N2',
        'description': 'This is an advanced level, often needed for work or university in Japan. It shows a person can understand many different things, like the news and articles. It also means they can talk about difficult topics clearly.',
        'active': True,
    },
    {
        'title': 'JLPT N1',
        'description': 'This is the highest and most difficult level. It shows a very high skill in Japanese, similar to a native speaker. A person at this level can understand complex writing, like in newspapers, and talk about difficult ideas in a very clear and detailed way.',
        'active': True,
    },
]


def build_level_course(level: dict) -> Course:
    features = '\n'.join(f'• {feature}' for feature in level['features'])
    return Course(
        id=level['id'],
        title=f"{level['title']} - {level['jlpt_level']}",
        description=f"{level['description']}\n\n{features}",
        active=True,
    )


def seed_levels(db: Session) -> list[Course]:
    level_ids = [level['id'] for level in LEVEL_DATA]
    existing = db.query(Course).filter(Course.id.in_(level_ids)).all()
    if existing:
        logger.info('Found %d existing levels. Skipping seed.', len(existing))
        return []

    courses = [build_level_course(level) for level in LEVEL_DATA]
    try:
        for course in courses:
            db.add(course)
            logger.info('Created course: %s', course.title)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise

    return courses


def seed_jlpt_courses(db: Session) -> list[Course]:
    titles = [course['title'] for course in JLPT_COURSES]
    existing = db.query(Course).filter(Course.title.in_(titles)).all()
    if existing:
        logger.info('JLPT courses already exist: %s', ', '.join(course.title for course in existing))
        return []

    courses = [Course(**data) for data in JLPT_COURSES]
    try:
        for course in courses:
            db.add(course)
            logger.info('Created course: %s', course.title)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise

    return courses


SEEDERS = {
    'levels': seed_levels,
    'jlpt': seed_jlpt_courses,
}


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description='Seed LMS courses.')
    parser.add_argument(
        '--set',
        dest='course_set',
        choices=sorted(SEEDERS),
        default='levels',
        help='Which course set to seed (default: %(default)s).',
    )
    return parser.parse_args(argv)


def run(course_set: str, db: Session) -> int:
    try:
        courses = SEEDERS[course_set](db)
    except SQLAlchemyError:
        logger.exception('Seeding %s courses failed', course_set)
        return 1

    for course in courses:
        status = 'Active' if course.active else 'Inactive'
        print(f'  - {course.title} ({status})')
    print('Seed completed successfully!')
    return 0


def main(argv: list[str] | None = None) -> None:
    configure_logging()
    args = parse_args(argv)

    init_db()
    db = SessionLocal()
    try:
        exit_code = run(args.course_set, db)
    finally:
        db.close()
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
