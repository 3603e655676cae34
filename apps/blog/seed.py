"""
Placeholder blog post data for development databases and tests.

Run directly to fill the configured database:
    python -m apps.blog.seed --count 10
"""

import argparse
import logging
import random

from apps.shared.database import SessionLocal, init_db
from apps.blog.store import BlogPostStore

logger = logging.getLogger(__name__)

TITLES = ["Blah One", "Blah Two", "The Blah", "The Blah Blah", "The Super Blah"]
CONTENTS = [
    "Yup Yup Yup Yup Yup Yup",
    "In Space, no one can hear you scream",
    "Ambition is always the shadow of dreams",
]
FIRST_NAMES = ["Russ", "Darth", "Luke", "R2", "James"]
LAST_NAMES = ["Sabs", "Vader", "Skywalker", "D2", "Kirk"]


def generate_blogpost_data() -> dict:
    """One create payload with a random title, content and author."""
    return {
        "title": random.choice(TITLES),
        "content": random.choice(CONTENTS),
        "author": {
            "firstName": random.choice(FIRST_NAMES),
            "lastName": random.choice(LAST_NAMES),
        },
    }


def seed_blogposts(store: BlogPostStore, count: int = 10) -> list:
    posts = [store.insert(**generate_blogpost_data()) for _ in range(count)]
    logger.info("Seeded %d blog posts", len(posts))
    return posts


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed the blog post table with placeholder posts")
    parser.add_argument("--count", type=int, default=10)
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO)
    init_db()
    db = SessionLocal()
    try:
        seed_blogposts(BlogPostStore(db), args.count)
    finally:
        db.close()


if __name__ == "__main__":
    main()
