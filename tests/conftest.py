from dataclasses import dataclass

import pytest


@dataclass
class Person:
    name: str
    age: int
    city: str


@pytest.fixture
def people() -> list[Person]:
    """Fifteen plain records with three fields each."""
    return [Person(name=f"p{i}", age=20 + i, city=f"c{i}") for i in range(15)]
