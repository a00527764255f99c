"""Populate a development database with users and blog posts."""
import asyncio
import argparse
import random
import time
from datetime import datetime, timezone, timedelta
from app.database import engine, async_session, Base
from app.models import User, Blog

TAGS = ["python", "fastapi", "postgresql", "docker", "kubernetes",
        "typescript", "aws", "devops", "testing", "performance",
        "security", "microservices", "rest-api"]

FIRST_NAMES = ["Jane", "John", "Ada", "Grace", "Linus", "Margaret", "Alan", "Barbara"]
LAST_NAMES = ["Janssen", "Smith", "Lovelace", "Hopper", "Torvalds", "Hamilton", "Turing", "Liskov"]

async def seed(small: bool = False):
    num_users = 8 if small else 50
    num_blogs = 100 if small else 5000

    print(f"Seeding: {num_users} users, {num_blogs} blogs")
    start = time.perf_counter()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    async with async_session() as session:
        users = []
        for i in range(num_users):
            user = User(
                first_name=FIRST_NAMES[i % len(FIRST_NAMES)],
                last_name=LAST_NAMES[(i // len(FIRST_NAMES) + i) % len(LAST_NAMES)],
                email=f"user_{i:04d}@example.com",
            )
            session.add(user)
            users.append(user)
        await session.flush()
        print(f"  Created {len(users)} users")

        batch_size = 500
        for batch_start in range(0, num_blogs, batch_size):
            batch_end = min(batch_start + batch_size, num_blogs)
            for i in range(batch_start, batch_end):
                created = datetime.now(timezone.utc) - timedelta(days=random.randint(0, 365))
                topic = random.choice(TAGS)
                session.add(Blog(
                    title=f"Blog {i}: Notes on {topic}",
                    content=f"This is the full content of blog post {i}. " * 20,
                    tags=random.sample(TAGS, k=random.randint(1, 4)),
                    image_urls=[f"https://images.example.com/blog-{i}-{n}.png" for n in range(random.randint(0, 3))],
                    created_at=created,
                    author=random.choice(users),
                ))
            await session.flush()
            print(f"  Batch {batch_start}-{batch_end}: blogs created")

        await session.commit()

    elapsed = time.perf_counter() - start
    print(f"\nSeeding complete in {elapsed:.1f}s")
    print(f"  Users: {num_users}")
    print(f"  Blogs: {num_blogs}")


def main():
    parser = argparse.ArgumentParser(description="Seed the blog database")
    parser.add_argument("--small", action="store_true", help="Use small dataset (100 blogs)")
    args = parser.parse_args()
    asyncio.run(seed(small=args.small))


if __name__ == "__main__":
    main()
