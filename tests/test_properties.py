import random

import pytest

from prettypy import EMPTY, render_to_string
from prettypy.layout import flatten
from tests._shared_cases import RAGGED, random_doc, uniform_token_doc

SEEDS = range(25)


@pytest.mark.parametrize("seed", SEEDS)
def test_concatenation_is_associative(seed: int) -> None:
    rng = random.Random(seed)
    a, b, c = (random_doc(rng) for _ in range(3))

    assert flatten((a + b) + c).ops == flatten(a + (b + c)).ops
    for width in (0, 8, 20, 80):
        assert render_to_string((a + b) + c, width) == render_to_string(a + (b + c), width)


@pytest.mark.parametrize("seed", SEEDS)
def test_empty_is_identity(seed: int) -> None:
    doc = random_doc(random.Random(seed))

    assert flatten(EMPTY + doc).ops == flatten(doc).ops
    assert flatten(doc + EMPTY).ops == flatten(doc).ops
    for width in (5, 40):
        expected = render_to_string(doc, width)
        assert render_to_string(EMPTY + doc, width) == expected
        assert render_to_string(doc + EMPTY, width) == expected


@pytest.mark.parametrize("seed", SEEDS)
def test_rendering_is_repeatable(seed: int) -> None:
    doc = random_doc(random.Random(seed))

    for width in (1, 12, 60):
        assert render_to_string(doc, width) == render_to_string(doc, width)
        assert render_to_string(doc, width, RAGGED) == render_to_string(doc, width, RAGGED)


@pytest.mark.parametrize("seed", SEEDS)
def test_fitted_lines_stay_within_width(seed: int) -> None:
    rng = random.Random(seed)
    token = "t" * rng.randint(1, 4)
    doc = uniform_token_doc(rng, token)

    for width in range(len(token), 30):
        output = render_to_string(doc, width)
        assert max(len(line) for line in output.split("\n")) <= width, output
