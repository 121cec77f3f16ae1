import random

import pytest

from wordsim.datasets import load_dictionary
from apps.cli.run import DEFAULT_DICTIONARY


@pytest.fixture(scope="session")
def dictionary():
    return load_dictionary(DEFAULT_DICTIONARY, 5)


@pytest.fixture(scope="session")
def sample(dictionary):
    # fixed seeded sample keeps batch tests quick
    return random.Random(2022).sample(dictionary, 150)
