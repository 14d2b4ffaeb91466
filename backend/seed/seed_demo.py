"""
Minimal deterministic seed: a few clubs with coach, stadium, squad and tournaments.
Idempotent: entities whose natural key already exists are skipped. No network calls.
"""
from __future__ import annotations

from datetime import date
from typing import Any, Dict, List

from core.context import FootballContext
from core.retry import RetryPolicy
from models import Club, Coach, Footballer, Stadium, Tournament
from repositories import (
    ClubRepository,
    CoachRepository,
    FootballerRepository,
    StadiumRepository,
    TournamentRepository,
)

# Dev-only fixtures; squads are abbreviated.
CLUBS: List[Dict[str, Any]] = [
    {
        "club": {"club_name": "Arsenal", "city": "London", "founded": date(1886, 1, 1)},
        "coach": {"name": "Mikel", "surname": "Arteta"},
        "stadium": {"stadium_name": "Emirates Stadium", "capacity": 60704},
        "footballers": [("Bukayo", "Saka"), ("Martin", "Odegaard"), ("Declan", "Rice")],
        "tournaments": ["Premier League", "UEFA Champions League"],
    },
    {
        "club": {"club_name": "Liverpool", "city": "Liverpool", "founded": date(1892, 6, 3)},
        "coach": {"name": "Arne", "surname": "Slot"},
        "stadium": {"stadium_name": "Anfield", "capacity": 61276},
        "footballers": [("Mohamed", "Salah"), ("Virgil", "van Dijk")],
        "tournaments": ["Premier League", "UEFA Champions League"],
    },
    {
        "club": {"club_name": "Real Madrid", "city": "Madrid", "founded": date(1902, 3, 6)},
        "coach": {"name": "Xabi", "surname": "Alonso"},
        "stadium": {"stadium_name": "Santiago Bernabeu", "capacity": 83186},
        "footballers": [("Jude", "Bellingham"), ("Vinicius", "Junior")],
        "tournaments": ["La Liga", "UEFA Champions League"],
    },
]


async def seed_demo(context: FootballContext, retry: RetryPolicy | None = None) -> Dict[str, int]:
    """Insert demo data through the repositories. Returns counts of inserted rows per kind."""
    retry = retry or RetryPolicy()
    clubs = ClubRepository(context, retry)
    coaches = CoachRepository(context, retry)
    stadiums = StadiumRepository(context, retry)
    footballers = FootballerRepository(context, retry)
    tournaments = TournamentRepository(context, retry)
    counts = {"clubs": 0, "coaches": 0, "stadiums": 0, "footballers": 0, "tournaments": 0}

    for entry in CLUBS:
        club_name = entry["club"]["club_name"]
        if not (await clubs.get_one(club_name)).ok:
            await clubs.create(Club(**entry["club"]))
            counts["clubs"] += 1
        if not (await coaches.get_one(entry["coach"]["surname"])).ok:
            await coaches.create(club_name, Coach(**entry["coach"]))
            counts["coaches"] += 1
        if not (await stadiums.get_one(entry["stadium"]["stadium_name"])).ok:
            await stadiums.create(club_name, Stadium(**entry["stadium"]))
            counts["stadiums"] += 1
        for name, surname in entry["footballers"]:
            if not (await footballers.get_one(surname)).ok:
                await footballers.create(club_name, Footballer(name=name, surname=surname))
                counts["footballers"] += 1
        for tournament_name in entry["tournaments"]:
            if not (await tournaments.get_one(tournament_name)).ok:
                await tournaments.create(Tournament(tournament_name=tournament_name))
                counts["tournaments"] += 1
            await tournaments.add_club(tournament_name, club_name)

    return counts
