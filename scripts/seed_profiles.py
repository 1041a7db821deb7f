#!/usr/bin/env python3
"""Insert the sample profiles if they are missing."""

import asyncio
import sys

import logfire

from persona.config import Settings
from persona.domain.model import Profile
from persona.domain.value import ProfileId
from persona.persistence.database import create_engine, create_session_factory
from persona.persistence.repository import PostgresProfileRepository
from persona.util.observability import configure_logfire

SEED_PROFILES = [
    Profile(
        id=ProfileId(1),
        name="A Martinez",
        description="Adolph Larrue Martinez III.",
        mbti="ISFJ",
        enneagram="9w3",
        variant="sp/so",
        tritype=725,
        socionics="SEE",
        sloan="RCOEN",
        psyche="FEVL",
        image="https://soulverse.boo.world/images/1.png",
    ),
]


async def seed(settings: Settings) -> int:
    """Insert each seed profile that does not exist yet.

    Returns:
        Number of profiles inserted
    """
    engine = create_engine(settings)
    session_factory = create_session_factory(engine)
    inserted = 0
    try:
        async with session_factory() as session:
            repository = PostgresProfileRepository(session)
            for profile in SEED_PROFILES:
                if await repository.exists(profile.id):
                    logfire.info("Seed profile already present", profile_id=profile.id)
                    continue
                await repository.save(profile)
                inserted += 1
                logfire.info("Seed profile inserted", profile_id=profile.id)
            await session.commit()
    finally:
        await engine.dispose()
    return inserted


def main() -> int:
    settings = Settings()
    configure_logfire(settings)

    try:
        inserted = asyncio.run(seed(settings))
        logfire.info("Seeding completed", inserted=inserted)
        return 0
    except Exception as e:
        logfire.error(
            "Seeding failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
