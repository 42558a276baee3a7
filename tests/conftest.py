"""Pytest configuration and fixtures for breeding engine tests"""
import random

import pytest

from factories import ScriptedRandom, make_creature
from data.loader import load_recipes, load_materials


@pytest.fixture
def rng():
    """Seeded random source"""
    return random.Random(12345)


@pytest.fixture
def scripted_rng():
    """Factory for a random source that replays the given draws"""
    def _build(*values, default=0.99):
        return ScriptedRandom(tuple(values), default=default)
    return _build


@pytest.fixture
def parent1():
    return make_creature("p1", "slime")


@pytest.fixture
def parent2():
    return make_creature("p2", "goblin")


@pytest.fixture(scope="session")
def recipes():
    """Recipe catalog shipped in data/"""
    return load_recipes()


@pytest.fixture(scope="session")
def materials():
    """Material catalog shipped in data/"""
    return load_materials()
