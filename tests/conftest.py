import random

import pytest

from santa_raffle.db import AssignmentStore, init_engine, make_session_factory
from santa_raffle.services import AdminAggregator, MatchingEngine, Participant, ParticipantDirectory

ADMIN_PASSWORD = "north-pole"

NAMES = ["ALICE", "BOB", "CAROL", "DAVE", "ERIN"]


def create_session_factory(tmp_path, name="santa.db"):
    return make_session_factory(init_engine(f"sqlite:///{tmp_path / name}"))


def create_store(tmp_path, name="santa.db"):
    return AssignmentStore(create_session_factory(tmp_path, name))


def create_directory(tmp_path, names=NAMES):
    directory = ParticipantDirectory(tmp_path / "participants.json")
    directory.seed([Participant(id=str(index), name=name) for index, name in enumerate(names, start=1)])
    return directory


@pytest.fixture
def directory(tmp_path):
    return create_directory(tmp_path)


@pytest.fixture
def store(tmp_path):
    return create_store(tmp_path)


@pytest.fixture
def engine(directory, store):
    return MatchingEngine(directory, store, rng=random.Random(7))


@pytest.fixture
def admin(directory, store):
    return AdminAggregator(directory, store, ADMIN_PASSWORD)
